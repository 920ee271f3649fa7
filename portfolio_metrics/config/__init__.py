from .loader import load_config
from .defaults import DEFAULT_CONFIG
from .report_config import ReportConfig

__all__ = [
    "load_config",
    "DEFAULT_CONFIG",
    "ReportConfig",
]
