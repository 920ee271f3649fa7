import pytest

from portfolio_metrics.core.aggregation import get_category_stats, get_metrics_summary
from portfolio_metrics.core.queries import (
    KEY_METRIC_IDS,
    get_key_metrics,
    get_metrics_by_category,
    get_metrics_by_timeframe,
    get_trending_metrics,
    search_metrics,
)
from portfolio_metrics.core.schema import CATEGORIES
from portfolio_metrics.core.store import get_all_metrics, load_metrics


# -------------------------------------------------
# Fixtures
# -------------------------------------------------

@pytest.fixture(scope="module")
def bundled_store():
    return load_metrics()


@pytest.fixture(params=["bundled", "sample", "mixed"])
def store(request, bundled_store, sample_store, mixed_store):
    return {
        "bundled": bundled_store,
        "sample": sample_store,
        "mixed": mixed_store,
    }[request.param]


# -------------------------------------------------
# Query invariants
# -------------------------------------------------

def test_categories_partition_store(store):
    """
    Every metric lands in exactly one category bucket.
    """
    all_ids = [m.id for m in get_all_metrics(store)]
    bucketed = []

    for category in CATEGORIES:
        metrics = get_metrics_by_category(store, category)
        assert all(m.category == category for m in metrics)
        bucketed.extend(m.id for m in metrics)

    assert sorted(bucketed) == sorted(all_ids)
    assert len(set(bucketed)) == len(bucketed)


def test_key_metrics_subset_of_store(store):
    all_ids = {m.id for m in get_all_metrics(store)}

    for metric in get_key_metrics(store):
        assert metric.id in all_ids
        assert metric.id in KEY_METRIC_IDS


def test_trending_is_exactly_trend_up(store):
    expected = [m.id for m in get_all_metrics(store) if m.trend == "up"]
    assert [m.id for m in get_trending_metrics(store)] == expected


def test_search_finds_every_name_and_description_fragment(store):
    for metric in get_all_metrics(store):
        assert metric in search_metrics(store, metric.name[:4].upper())
        assert metric in search_metrics(store, metric.description[-5:].lower())

    assert search_metrics(store, "") == get_all_metrics(store)


def test_queries_are_idempotent(store):
    assert get_metrics_by_category(store, "growth") == get_metrics_by_category(store, "growth")
    assert get_key_metrics(store) == get_key_metrics(store)
    assert get_trending_metrics(store) == get_trending_metrics(store)
    assert get_metrics_by_timeframe(store, "2024") == get_metrics_by_timeframe(store, "2024")
    assert search_metrics(store, "customer") == search_metrics(store, "customer")
    assert get_category_stats(store) == get_category_stats(store)
    assert get_metrics_summary(store) == get_metrics_summary(store)


# -------------------------------------------------
# Aggregation invariants
# -------------------------------------------------

def test_category_counts_sum_to_total(store):
    summary = get_metrics_summary(store)
    stats = summary["category_stats"]

    assert sum(s["count"] for s in stats.values()) == summary["total_metrics"]
    assert summary["trending_up"] == len(get_trending_metrics(store))


def test_min_average_max_ordering(store):
    for stats in get_category_stats(store).values():
        assert stats["min"] <= stats["average"] <= stats["max"]


def test_bundled_key_metrics_all_present(bundled_store):
    assert {m.id for m in get_key_metrics(bundled_store)} == set(KEY_METRIC_IDS)
