"""
Unit tests for dashboard metrics.
"""

import random

import pytest

from farmapp.core.metrics import CHART_LABELS, TimeRange, dashboard_metrics, graph_data
from farmapp.core.types import Trend


class TestDashboardMetrics:

    @pytest.mark.parametrize("time_range", ["day", "week", "month"])
    def test_all_cards_present(self, time_range):
        cards = dashboard_metrics(time_range)
        assert set(cards) == {
            "uvc", "ticketMedio", "precoMedio",
            "rupturaEstoque", "quantidadeCupons", "capilaridadeProdutos",
        }

    def test_week_values(self):
        cards = dashboard_metrics(TimeRange.WEEK)
        assert cards["uvc"].value == "1.562"
        assert cards["capilaridadeProdutos"].trend == Trend.DOWN

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            dashboard_metrics("year")

    def test_returns_a_copy(self):
        dashboard_metrics("day").clear()
        assert dashboard_metrics("day")


class TestGraphData:

    def test_labels_follow_range(self):
        chart = graph_data("uvc", "month", rng=random.Random(1))
        assert chart.labels == CHART_LABELS[TimeRange.MONTH]
        assert len(chart.data) == 4

    def test_values_within_metric_range(self):
        chart = graph_data("precoMedio", "week", rng=random.Random(2))
        assert all(25 <= v <= 45 for v in chart.data)

    def test_unknown_metric_uses_default_range(self):
        chart = graph_data("somethingElse", "day", rng=random.Random(3))
        assert all(0 <= v <= 100 for v in chart.data)

    def test_seeded(self):
        first = graph_data("uvc", "day", rng=random.Random(11))
        second = graph_data("uvc", "day", rng=random.Random(11))
        assert first == second

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            graph_data("uvc", "hour")
