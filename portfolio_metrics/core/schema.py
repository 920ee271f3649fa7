"""
Metric record schema.

Purpose:
- Single definition of the Metric record shared by every layer
- Closed vocabularies for category, trend and display units
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Union

# -------------------------------------------------
# Closed vocabularies
# -------------------------------------------------
CATEGORIES = (
    "retention",
    "growth",
    "satisfaction",
    "efficiency",
    "revenue",
)

TRENDS = ("up", "down", "stable")

# Display unit tags understood by the formatters.
# Any other unit string is passed through verbatim.
UNIT_PERCENT = "%"
UNIT_MILLION = ("M", "million")
UNIT_THOUSAND = ("K", "thousand")
UNIT_NPS = "NPS"
UNIT_POSITIONS = "positions"

MetricValue = Union[int, float, str]


@dataclass(frozen=True)
class Metric:
    id: str
    name: str
    value: MetricValue
    unit: str
    description: str
    category: str
    timeframe: str = ""
    context: str = ""
    trend: Optional[str] = None
    icon: Optional[str] = None

    @property
    def is_numeric(self) -> bool:
        return isinstance(self.value, (int, float)) and not isinstance(
            self.value, bool
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = [
    "CATEGORIES",
    "TRENDS",
    "UNIT_PERCENT",
    "UNIT_MILLION",
    "UNIT_THOUSAND",
    "UNIT_NPS",
    "UNIT_POSITIONS",
    "Metric",
    "MetricValue",
]
