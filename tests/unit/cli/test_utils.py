"""Unit tests for CLI utilities."""

import logging
from unittest.mock import MagicMock

import yaml

from farmapp.cli.utils import echo_error, echo_success, load_graph, open_plan_repository
from farmapp.core.types import FlowType, Indicator, IndicatorTree


class TestUtils:
    def test_load_graph_default_provider(self):
        graph = load_graph()
        assert graph.indicator_count == 16

    def test_load_graph_custom_provider(self):
        provider = MagicMock()
        provider.load.return_value = IndicatorTree(
            indicators=[Indicator(id="a", name="A", flow_type=FlowType.CUPOM)]
        )
        graph = load_graph(provider)
        assert graph.get_indicator("a") is not None

    def test_load_graph_logs_problems(self, caplog):
        provider = MagicMock()
        provider.load.return_value = IndicatorTree(
            indicators=[Indicator(id="a", name="A", flow_type=FlowType.CUPOM, parent_id="nope")]
        )
        with caplog.at_level(logging.WARNING):
            load_graph(provider)
        assert "unknown parent 'nope'" in caplog.text

    def test_open_plan_repository_explicit_path(self, tmp_path):
        repo = open_plan_repository(str(tmp_path / "sub" / "plans.db"))
        assert repo.count() == 12

    def test_open_plan_repository_from_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".farmapp").mkdir()
        (tmp_path / ".farmapp" / "config.yaml").write_text(yaml.dump({"db_path": "custom.db"}))

        repo = open_plan_repository()

        assert repo.db_path.name == "custom.db"
        assert (tmp_path / "custom.db").exists()

    def test_echo_helpers(self, capsys):
        echo_success("done")
        echo_error("failed")
        captured = capsys.readouterr()
        assert "done" in captured.out
        assert "failed" in captured.err
