import pytest

from portfolio_metrics.config.defaults import DEFAULT_CONFIG
from portfolio_metrics.config.loader import load_config
from portfolio_metrics.config.report_config import ReportConfig


def test_defaults_without_file():
    config = load_config(None)

    assert config["data_path"] is None
    assert config["output_dir"] == "runs"
    assert isinstance(config["report_config"], ReportConfig)
    assert config["report_config"].chart is True
    assert config["report_config"].pdf is False


def test_user_config_merges_sections(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "output_dir: out\n"
        "report:\n"
        "  pdf: true\n"
        "  title: My Metrics\n",
        encoding="utf-8",
    )

    config = load_config(path)

    assert config["output_dir"] == "out"
    assert config["report"]["pdf"] is True
    # untouched keys keep their defaults
    assert config["report"]["chart"] is True
    assert config["report_config"].title == "My Metrics"


def test_defaults_are_not_mutated(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("report:\n  category: growth\n", encoding="utf-8")

    load_config(path)

    assert DEFAULT_CONFIG["report"]["category"] == "all"


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_non_dict_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError, match="YAML dictionary"):
        load_config(path)


def test_report_config_ignores_unknown_keys():
    cfg = ReportConfig.from_dict({"pdf": True, "theme": "dark"})
    assert cfg.pdf is True
    assert not hasattr(cfg, "theme")
