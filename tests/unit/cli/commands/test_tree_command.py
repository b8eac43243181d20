"""
Unit tests for the 'tree' command.
"""

import pytest
from click.testing import CliRunner
from rich.console import Console
from unittest.mock import patch

from farmapp.cli.commands.tree import build_flow_tree, tree
from farmapp.cli.utils import load_graph
from farmapp.core.types import FlowType


class TestTreeCommand:

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.fixture(autouse=True)
    def wide_console(self):
        with patch("farmapp.cli.commands.tree.console", Console(width=200)):
            yield

    def test_both_flows_by_default(self, runner):
        result = runner.invoke(tree)

        assert result.exit_code == 0
        assert "Faturamento" in result.output
        assert "Qtd. Cupons" in result.output

    def test_single_flow(self, runner):
        result = runner.invoke(tree, ["--flow", "cupom"])

        assert result.exit_code == 0
        assert "Fluxo de Loja" in result.output
        assert "Ticket Médio" not in result.output

    def test_invalid_flow(self, runner):
        result = runner.invoke(tree, ["--flow", "estoque"])
        assert result.exit_code == 2

    def test_hierarchy_follows_parent_id(self):
        rendered = build_flow_tree(load_graph(), FlowType.FATURAMENTO)
        root = rendered.children[0]
        assert len(root.children) == 2
