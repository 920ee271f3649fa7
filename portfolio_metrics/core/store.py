"""
Metric store.

The store is built once by an explicit load step and then passed
to the query and aggregation functions. It never changes after
construction.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from .schema import Metric
from .validator import MetricLoadError, MetricValidator

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "metrics.json"


@dataclass(frozen=True)
class MetricStore:
    metrics: Tuple[Metric, ...] = ()

    @classmethod
    def from_records(cls, records: Iterable[Any], strict: bool = False) -> "MetricStore":
        """
        Validate raw records and build a store.

        Raises MetricLoadError on the first invalid record.
        """
        metrics = MetricValidator(strict=strict).validate(records)
        return cls(metrics=tuple(metrics))

    def __len__(self) -> int:
        return len(self.metrics)

    def __iter__(self) -> Iterator[Metric]:
        return iter(self.metrics)


def load_metrics(
    path: Optional[Union[str, Path]] = None,
    strict: bool = False,
) -> MetricStore:
    """
    Load and validate a metrics JSON file.

    path=None loads the bundled dataset.
    """
    path = Path(path) if path else DEFAULT_DATA_PATH

    if not path.exists():
        raise FileNotFoundError(f"Metrics file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            records = json.load(f)
        except json.JSONDecodeError as exc:
            raise MetricLoadError(f"{path} is not valid JSON: {exc}") from exc

    if not isinstance(records, list):
        raise MetricLoadError(f"{path} must contain a JSON list of metrics")

    store = MetricStore.from_records(records, strict=strict)
    logger.info("Loaded %d metrics from %s", len(store), path)
    return store


def get_all_metrics(store: MetricStore) -> List[Metric]:
    """All metrics in authored order."""
    return list(store.metrics)


__all__ = ["DEFAULT_DATA_PATH", "MetricStore", "load_metrics", "get_all_metrics"]
