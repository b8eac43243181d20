"""
Unit tests for the 'graph' command.
"""

import json

import pytest
import yaml
from click.testing import CliRunner
from rich.console import Console
from unittest.mock import patch

from farmapp.cli.commands.graph import graph


class TestGraphCommand:

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture(autouse=True)
    def wide_console(self):
        with patch("farmapp.cli.commands.graph.console", Console(width=200)):
            yield

    def test_json_output(self, runner):
        result = runner.invoke(graph, ["uvc", "--seed", "1", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["status"] == "success"
        assert data["meta"]["command"] == "graph"
        roles = {n["id"]: n["role"] for n in data["data"]["nodes"]}
        assert roles["uvc"] == "central"
        assert roles["ticketMedio"] == "primary"

    def test_table_output(self, runner):
        result = runner.invoke(graph, ["sortimento", "--flow", "cupom", "--seed", "1"])

        assert result.exit_code == 0
        assert "central" in result.output
        assert "taxaConversao" in result.output

    def test_depth(self, runner):
        result = runner.invoke(graph, ["uvc", "--depth", "3", "--seed", "1", "--json"])
        roles = {n["role"] for n in json.loads(result.output)["data"]["nodes"]}
        assert "context" in roles

    def test_unknown_indicator(self, runner):
        result = runner.invoke(graph, ["ghost"])

        assert result.exit_code == 1
        assert "Indicator not found: ghost" in result.output

    def test_unknown_indicator_json(self, runner):
        result = runner.invoke(graph, ["uvc", "--flow", "cupom", "--json"])

        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["status"] == "error"
        assert data["error"]["code"] == "IndicatorNotFoundError"

    def test_flow_and_depth_from_project_config(self, runner, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".farmapp").mkdir()
        (tmp_path / ".farmapp" / "config.yaml").write_text(
            yaml.dump({"default_flow": "cupom", "graph_depth": 1})
        )

        result = runner.invoke(graph, ["sortimento", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["flow_type"] == "cupom"
        assert "secondary" not in {n["role"] for n in data["nodes"]}
