"""
Unit tests for the 'recommend', 'history' and 'causes' commands.
"""

import pytest
from click.testing import CliRunner
from rich.console import Console
from unittest.mock import patch

from farmapp.cli.commands.causes import causes
from farmapp.cli.commands.history import history
from farmapp.cli.commands.recommend import recommend


@pytest.fixture
def runner():
    return CliRunner()


class TestRecommendCommand:

    @pytest.fixture(autouse=True)
    def wide_console(self):
        with patch("farmapp.cli.commands.recommend.console", Console(width=250)):
            yield

    def test_lists_recommendations(self, runner):
        result = runner.invoke(recommend, ["uvc"])

        assert result.exit_code == 0
        assert "ajuste-estoque-001" in result.output
        assert "high" in result.output

    def test_non_actionable_indicator(self, runner):
        result = runner.invoke(recommend, ["ticketMedio"])

        assert result.exit_code == 0
        assert "No recommendations for ticketMedio" in result.output
        assert "actionable" in result.output


class TestHistoryCommand:

    @pytest.fixture(autouse=True)
    def wide_console(self):
        with patch("farmapp.cli.commands.history.console", Console(width=120)):
            yield

    def test_seeded_history(self, runner):
        first = runner.invoke(history, ["uvc", "--days", "3", "--seed", "4"])
        second = runner.invoke(history, ["uvc", "--days", "3", "--seed", "4"])

        assert first.exit_code == 0
        assert first.output == second.output
        assert "History: uvc" in first.output

    def test_unknown_indicator(self, runner):
        result = runner.invoke(history, ["ghost"])
        assert "No history for ghost" in result.output

    def test_days_must_be_positive(self, runner):
        result = runner.invoke(history, ["uvc", "--days", "0"])
        assert result.exit_code == 2


class TestCausesCommand:

    def test_lists_causes_and_sources(self, runner):
        result = runner.invoke(causes, ["ticketMedio"])

        assert result.exit_code == 0
        assert "Poucos itens por cupom (UVC baixa)" in result.output
        assert "Influenced by:" in result.output
        assert "aderenciaEstoque" in result.output

    def test_unknown_indicator(self, runner):
        result = runner.invoke(causes, ["ghost"])
        assert "No known causes for ghost" in result.output
