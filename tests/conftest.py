import copy

import pytest

from portfolio_metrics.core.store import MetricStore


SAMPLE_RECORDS = [
    {
        "id": "metric-1",
        "name": "Customer Satisfaction",
        "value": 95,
        "unit": "%",
        "description": "Customer satisfaction rating",
        "category": "satisfaction",
        "timeframe": "2023-2024",
        "context": "Test context",
        "trend": "up",
        "icon": "😊",
    },
    {
        "id": "metric-cs-engagement",
        "name": "Customer Engagement",
        "value": 80,
        "unit": "%",
        "description": "Customer engagement improvement",
        "category": "growth",
        "timeframe": "2023-2024",
        "context": "Test context",
        "trend": "up",
        "icon": "📈",
    },
    {
        "id": "metric-nps-current",
        "name": "Net Promoter Score",
        "value": 98,
        "unit": "NPS",
        "description": "Current NPS score",
        "category": "satisfaction",
        "timeframe": "2024",
        "context": "Survey based",
        "trend": "stable",
        "icon": "⭐",
    },
]


@pytest.fixture
def sample_records():
    """
    Deterministic raw records: 2 satisfaction, 1 growth.
    """
    return copy.deepcopy(SAMPLE_RECORDS)


@pytest.fixture
def sample_store(sample_records):
    return MetricStore.from_records(sample_records)


@pytest.fixture
def mixed_store():
    """
    Store with string values, a zero-numeric category and a key metric
    placed after a non-key metric.
    """
    return MetricStore.from_records([
        {
            "id": "metric-accounts",
            "name": "Enterprise Accounts",
            "value": "10+",
            "unit": " accounts",
            "description": "Strategic accounts owned",
            "category": "revenue",
            "timeframe": "2022-2024",
            "context": "Fortune 500",
        },
        {
            "id": "metric-customer-retention",
            "name": "Retention Rate",
            "value": 90,
            "unit": "%",
            "description": "Gross logo retention",
            "category": "retention",
            "timeframe": "2024",
            "context": "Book of business",
            "trend": "down",
        },
        {
            "id": "metric-cs-engagement",
            "name": "Engagement",
            "value": 70,
            "unit": "%",
            "description": "Engagement uplift",
            "category": "retention",
            "timeframe": "FY2024",
            "context": "Onboarding programme",
            "trend": "up",
        },
        {
            "id": "metric-delta",
            "name": "Leaderboard Delta",
            "value": -3,
            "unit": "positions",
            "description": "Leaderboard movement",
            "category": "growth",
            "timeframe": "2024",
            "context": "Internal ranking",
        },
    ])
