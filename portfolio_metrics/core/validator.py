import logging
import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterable, List, Optional

from .schema import CATEGORIES, TRENDS, Metric

logger = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = ("id", "name", "unit", "description")
OPTIONAL_TEXT_FIELDS = ("timeframe", "context")
KNOWN_FIELDS = {f.name for f in fields(Metric)}


class MetricLoadError(ValueError):
    """
    Raised when backing metric data fails validation.

    Carries the offending record index and field so the
    load failure can be traced back to the source file.
    """

    def __init__(self, message: str, index: Optional[int] = None, field: Optional[str] = None):
        self.index = index
        self.field = field

        location = []
        if index is not None:
            location.append(f"record {index}")
        if field is not None:
            location.append(f"field '{field}'")

        if location:
            message = f"{', '.join(location)}: {message}"

        super().__init__(message)


@dataclass
class MetricValidator:
    """
    Load-boundary validation for metric records.

    strict=True rejects unknown keys instead of ignoring them.
    """
    strict: bool = False

    def validate_record(self, record: Any, index: int) -> Metric:
        if not isinstance(record, dict):
            raise MetricLoadError(
                f"expected an object, got {type(record).__name__}", index=index
            )

        unknown = set(record) - KNOWN_FIELDS
        if unknown:
            if self.strict:
                raise MetricLoadError(
                    f"unknown keys {sorted(unknown)}", index=index
                )
            logger.debug("Record %d: ignoring unknown keys %s", index, sorted(unknown))

        # ---- Required text ----
        for name in REQUIRED_TEXT_FIELDS:
            value = record.get(name)
            if value is None:
                raise MetricLoadError("is required", index=index, field=name)
            if not isinstance(value, str):
                raise MetricLoadError("must be a string", index=index, field=name)
            if not value.strip():
                raise MetricLoadError("must not be empty", index=index, field=name)

        # ---- Optional text ----
        for name in OPTIONAL_TEXT_FIELDS:
            value = record.get(name, "")
            if value is not None and not isinstance(value, str):
                raise MetricLoadError("must be a string", index=index, field=name)

        # ---- Value ----
        if "value" not in record:
            raise MetricLoadError("is required", index=index, field="value")
        value = record["value"]
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise MetricLoadError(
                "must be a number or a string", index=index, field="value"
            )
        if not isinstance(value, str):
            try:
                finite = math.isfinite(float(value))
            except OverflowError:
                finite = False
            if not finite:
                raise MetricLoadError("must be finite", index=index, field="value")

        # ---- Enumerations ----
        category = record.get("category")
        if category not in CATEGORIES:
            raise MetricLoadError(
                f"{category!r} is not one of {', '.join(CATEGORIES)}",
                index=index,
                field="category",
            )

        trend = record.get("trend")
        if trend is not None and trend not in TRENDS:
            raise MetricLoadError(
                f"{trend!r} is not one of {', '.join(TRENDS)}",
                index=index,
                field="trend",
            )

        icon = record.get("icon")
        if icon is not None and not isinstance(icon, str):
            raise MetricLoadError("must be a string", index=index, field="icon")

        return Metric(
            id=record["id"],
            name=record["name"],
            value=value,
            unit=record["unit"],
            description=record["description"],
            category=category,
            timeframe=record.get("timeframe") or "",
            context=record.get("context") or "",
            trend=trend,
            icon=icon,
        )

    def validate(self, records: Iterable[Any]) -> List[Metric]:
        metrics: List[Metric] = []
        seen: Dict[str, int] = {}

        for index, record in enumerate(records):
            metric = self.validate_record(record, index)

            if metric.id in seen:
                raise MetricLoadError(
                    f"duplicate id {metric.id!r} (first seen at record {seen[metric.id]})",
                    index=index,
                    field="id",
                )
            seen[metric.id] = index
            metrics.append(metric)

        return metrics


__all__ = ["MetricLoadError", "MetricValidator"]
