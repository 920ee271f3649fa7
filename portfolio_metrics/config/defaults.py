DEFAULT_CONFIG = {
    # -----------------------------
    # DATA SOURCE
    # -----------------------------
    # None loads the bundled metrics.json
    "data_path": None,

    # -----------------------------
    # REPORTING
    # -----------------------------
    "report": {
        "title": "Performance Metrics",
        "format": "md",        # md is SOURCE OF TRUTH
        "category": "all",
        "chart": True,
        "pdf": False,
    },

    # -----------------------------
    # OUTPUT CONTROL
    # -----------------------------
    "output_dir": "runs",

    # -----------------------------
    # LOGGING
    # -----------------------------
    "logging": {
        "level": "INFO",
    },

    # -----------------------------
    # METADATA (OPTIONAL)
    # -----------------------------
    "metadata": {},
}
