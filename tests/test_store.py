import json
from dataclasses import FrozenInstanceError

import pytest

from portfolio_metrics.core.schema import CATEGORIES, Metric
from portfolio_metrics.core.store import (
    DEFAULT_DATA_PATH,
    MetricStore,
    get_all_metrics,
    load_metrics,
)
from portfolio_metrics.core.validator import MetricLoadError


def test_get_all_metrics_preserves_order(sample_store, sample_records):
    metrics = get_all_metrics(sample_store)

    assert len(metrics) == 3
    assert [m.id for m in metrics] == [r["id"] for r in sample_records]
    assert all(isinstance(m, Metric) for m in metrics)


def test_get_all_metrics_returns_copy(sample_store):
    metrics = get_all_metrics(sample_store)
    metrics.clear()

    assert len(get_all_metrics(sample_store)) == 3


def test_metrics_are_immutable(sample_store):
    metric = get_all_metrics(sample_store)[0]
    with pytest.raises(FrozenInstanceError):
        metric.value = 1


def test_empty_store():
    store = MetricStore.from_records([])
    assert get_all_metrics(store) == []
    assert len(store) == 0


def test_load_bundled_dataset():
    store = load_metrics()

    assert DEFAULT_DATA_PATH.exists()
    assert len(store) > 0
    assert all(m.category in CATEGORIES for m in store)


def test_load_from_file(tmp_path, sample_records):
    path = tmp_path / "metrics.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")

    store = load_metrics(path)
    assert [m.id for m in store] == [r["id"] for r in sample_records]


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_metrics(tmp_path / "nope.json")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "metrics.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(MetricLoadError, match="not valid JSON"):
        load_metrics(path)


def test_load_non_list_root(tmp_path):
    path = tmp_path / "metrics.json"
    path.write_text(json.dumps({"id": "x"}), encoding="utf-8")

    with pytest.raises(MetricLoadError, match="JSON list"):
        load_metrics(path)


def test_load_rejects_bad_category(tmp_path, sample_records):
    sample_records[1]["category"] = "other"
    path = tmp_path / "metrics.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")

    with pytest.raises(MetricLoadError) as exc_info:
        load_metrics(path)

    assert exc_info.value.index == 1
    assert exc_info.value.field == "category"
