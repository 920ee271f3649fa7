from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class ReportConfig:
    """
    Typed view over the "report" config section.
    """
    title: str = "Performance Metrics"
    format: str = "md"
    category: str = "all"
    chart: bool = True
    pdf: bool = False

    @classmethod
    def from_dict(cls, cfg: Dict[str, Any]) -> "ReportConfig":
        known = {k: v for k, v in (cfg or {}).items() if k in cls.__dataclass_fields__}
        return cls(**known)
