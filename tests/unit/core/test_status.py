"""
Unit tests for indicator status classification.
"""

import pytest

from farmapp.core.status import classify, format_variation, parse_number, variation_percent
from farmapp.core.types import IndicatorStatus


class TestParseNumber:

    @pytest.mark.parametrize("raw, expected", [
        (3.2, 3.2),
        (0, 0.0),
        ("91.15", 91.15),
        ("3,2", 3.2),
        ("1.234,56", 1234.56),
        ("94.8%", 94.8),
        (" 42 ", 42.0),
    ])
    def test_parses_numeric_input(self, raw, expected):
        assert parse_number(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", True, float("nan"), float("inf"), [1]])
    def test_rejects_unusable_input(self, raw):
        assert parse_number(raw) is None


class TestClassify:

    def test_below_target(self):
        assert classify(91.15, 100) == IndicatorStatus.BELOW

    def test_above_target(self):
        assert classify(623, 600) == IndicatorStatus.ABOVE

    def test_exactly_on_target_is_above(self):
        assert classify(100, 100) == IndicatorStatus.ABOVE

    def test_zero_value_is_a_real_value(self):
        assert classify(0, 10) == IndicatorStatus.BELOW

    def test_string_inputs(self):
        assert classify("3,2", "3,5") == IndicatorStatus.BELOW
        assert classify("102.5", "100") == IndicatorStatus.ABOVE

    @pytest.mark.parametrize("value, target", [
        (None, 10),
        (10, None),
        ("", 10),
        ("n/a", 10),
        (10, 0),
        (float("nan"), 1),
    ])
    def test_neutral_when_inputs_unusable(self, value, target):
        assert classify(value, target) == IndicatorStatus.NEUTRAL

    def test_never_neutral_for_valid_pairs(self):
        for value, target in [(1, 2), (2, 1), (-5, 3), (3, -5), (0.0001, 0.0002)]:
            assert classify(value, target) != IndicatorStatus.NEUTRAL


class TestVariation:

    def test_variation_percent(self):
        assert variation_percent(56789.50, 60000) == pytest.approx(-5.350833, rel=1e-5)

    def test_variation_percent_zero_target(self):
        assert variation_percent(10, 0) is None

    def test_format_variation(self):
        assert format_variation(56789.50, 60000) == "-5.35%"
        assert format_variation(102.5, 100) == "+2.50%"
        assert format_variation(623, 600, decimals=1) == "+3.8%"

    def test_format_variation_unusable(self):
        assert format_variation(None, 100) == ""
