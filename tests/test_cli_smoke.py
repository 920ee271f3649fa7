import json
import os
import subprocess
import sys


def run_cli(args, **kwargs):
    return subprocess.run(
        [sys.executable, "-m", "portfolio_metrics.cli"] + args,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        encoding="utf-8",
        env={**os.environ, "PYTHONIOENCODING": "utf-8"},
        **kwargs,
    )


def test_cli_help():
    result = run_cli(["--help"])
    assert result.returncode == 0


def test_cli_version():
    result = run_cli(["--version"])
    assert result.returncode == 0
    assert "portfolio-metrics" in result.stdout


def test_cli_summary():
    result = run_cli(["summary"])
    assert result.returncode == 0
    assert "Total metrics" in result.stdout


def test_cli_search(tmp_path, sample_records):
    path = tmp_path / "metrics.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")

    result = run_cli(["--data", str(path), "search", "promoter"])
    assert result.returncode == 0
    assert "Net Promoter Score: 98" in result.stdout


def test_cli_bad_data(tmp_path, sample_records):
    sample_records[0]["category"] = "marketing"
    path = tmp_path / "metrics.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")

    result = run_cli(["--data", str(path), "summary"])
    assert result.returncode == 2
    assert "category" in result.stderr


def test_cli_report(tmp_path):
    result = run_cli(["report", "--no-chart", "--output-dir", str(tmp_path)])
    assert result.returncode == 0
    assert list(tmp_path.glob("*/Metrics_Dashboard.md"))


def _write_records(tmp_path, records):
    path = tmp_path / "metrics.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return str(path)


def test_cli_category(tmp_path, sample_records):
    result = run_cli(["--data", _write_records(tmp_path, sample_records), "category", "satisfaction"])
    assert result.returncode == 0
    assert "Customer Satisfaction" in result.stdout
    assert "Net Promoter Score" in result.stdout
    assert "Customer Engagement" not in result.stdout


def test_cli_timeframe(tmp_path, sample_records):
    result = run_cli(["--data", _write_records(tmp_path, sample_records), "timeframe", "2023"])
    assert result.returncode == 0
    assert "Customer Engagement" in result.stdout
    assert "Net Promoter Score" not in result.stdout


def test_cli_trending(tmp_path, sample_records):
    result = run_cli(["--data", _write_records(tmp_path, sample_records), "trending"])
    assert result.returncode == 0
    assert "Customer Satisfaction" in result.stdout
    assert "Customer Engagement" in result.stdout
    assert "Net Promoter Score" not in result.stdout
