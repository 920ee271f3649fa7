from pathlib import Path
from typing import Any, Dict


class BaseReport:
    """
    Contract for report engines (Markdown, PDF).

    Responsibilities:
    - Define build() interface
    - Sanity-check the dashboard payload before rendering
    """

    name: str = "base"

    def build(self, payload: Dict[str, Any], output_dir: Path) -> Path:
        raise NotImplementedError(
            f"{self.__class__.__name__} must implement build()"
        )

    def validate_payload(self, payload: Dict[str, Any]):
        if not isinstance(payload, dict):
            raise ValueError("payload must be a dict")

        for key in ("summary", "key_metrics", "metrics"):
            if key not in payload:
                raise ValueError(f"payload is missing '{key}'")
