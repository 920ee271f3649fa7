import copy
from pathlib import Path
from typing import Optional, Union

import yaml

from .defaults import DEFAULT_CONFIG
from .report_config import ReportConfig


# -------------------------------------------------
# MAIN CONFIG LOADER
# -------------------------------------------------
def load_config(path: Optional[Union[str, Path]] = None) -> dict:
    """
    Load and merge user config with defaults.

    Rules:
    - Defaults win for any field the user omits
    - Dict sections are merged key by key, scalars are replaced
    - output_dir and report always exist
    """

    # -------------------------------------------------
    # 1. Load user config (if provided)
    # -------------------------------------------------
    user_config = {}

    if path:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}

        if not isinstance(user_config, dict):
            raise ValueError("Config file must contain a YAML dictionary")

    # -------------------------------------------------
    # 2. Merge with defaults
    # -------------------------------------------------
    config = copy.deepcopy(DEFAULT_CONFIG)

    for key, value in user_config.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key].update(value)
        else:
            config[key] = value

    # -------------------------------------------------
    # 3. Required invariants
    # -------------------------------------------------
    config.setdefault("output_dir", "runs")
    config.setdefault("metadata", {})

    if not isinstance(config.get("report"), dict):
        raise ValueError("'report' section must be a dictionary")

    config["report_config"] = ReportConfig.from_dict(config["report"])

    return config
