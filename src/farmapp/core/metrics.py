"""
Dashboard KPI cards and chart series per time range.
"""

import random
from enum import StrEnum
from typing import Dict, List, Optional, Tuple

from .types import ChartData, MetricData


class TimeRange(StrEnum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


def _m(value: str, trend: str, trend_value: str) -> MetricData:
    return MetricData(value=value, trend=trend, trend_value=trend_value)


_DASHBOARD: Dict[TimeRange, Dict[str, MetricData]] = {
    TimeRange.DAY: {
        "uvc": _m("237", "up", "+12%"),
        "ticketMedio": _m("R$ 87,35", "up", "+5%"),
        "precoMedio": _m("R$ 32,18", "down", "-3%"),
        "rupturaEstoque": _m("5%", "down", "-2%"),
        "quantidadeCupons": _m("156", "up", "+8%"),
        "capilaridadeProdutos": _m("83%", "neutral", "0%"),
    },
    TimeRange.WEEK: {
        "uvc": _m("1.562", "up", "+8%"),
        "ticketMedio": _m("R$ 92,47", "up", "+4%"),
        "precoMedio": _m("R$ 34,25", "up", "+1%"),
        "rupturaEstoque": _m("7%", "up", "+1%"),
        "quantidadeCupons": _m("983", "up", "+15%"),
        "capilaridadeProdutos": _m("79%", "down", "-3%"),
    },
    TimeRange.MONTH: {
        "uvc": _m("6.845", "up", "+18%"),
        "ticketMedio": _m("R$ 95,12", "up", "+7%"),
        "precoMedio": _m("R$ 35,50", "up", "+4%"),
        "rupturaEstoque": _m("6%", "down", "-1%"),
        "quantidadeCupons": _m("4.230", "up", "+22%"),
        "capilaridadeProdutos": _m("86%", "up", "+5%"),
    },
}

CHART_LABELS: Dict[TimeRange, List[str]] = {
    TimeRange.DAY: ["8h", "10h", "12h", "14h", "16h", "18h", "20h"],
    TimeRange.WEEK: ["Seg", "Ter", "Qua", "Qui", "Sex", "Sáb", "Dom"],
    TimeRange.MONTH: ["Sem 1", "Sem 2", "Sem 3", "Sem 4"],
}

# Inclusive (min, max) per metric
CHART_RANGES: Dict[str, Tuple[int, int]] = {
    "uvc": (50, 300),
    "ticketMedio": (70, 120),
    "precoMedio": (25, 45),
    "rupturaEstoque": (2, 15),
    "quantidadeCupons": (30, 200),
    "capilaridadeProdutos": (65, 95),
}
DEFAULT_CHART_RANGE = (0, 100)


def dashboard_metrics(time_range: str = TimeRange.DAY) -> Dict[str, MetricData]:
    """
    KPI cards for the dashboard.

    Raises:
        ValueError: if ``time_range`` is not day/week/month.
    """
    return dict(_DASHBOARD[TimeRange(time_range)])


def graph_data(
    metric: str,
    time_range: str = TimeRange.DAY,
    rng: Optional[random.Random] = None,
) -> ChartData:
    """Random integer series for one metric, one point per label."""
    rng = rng or random.Random()
    labels = CHART_LABELS[TimeRange(time_range)]
    low, high = CHART_RANGES.get(metric, DEFAULT_CHART_RANGE)
    return ChartData(
        labels=list(labels),
        data=[rng.randint(low, high) for _ in labels],
    )
