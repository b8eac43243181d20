"""
Tree Command - Show the indicator hierarchy.

Renders each flow as a rich tree following ``parent_id``. Primary
(actionable) indicators are marked with a star.
"""

from typing import Optional

import click
from rich.console import Console
from rich.tree import Tree

from ...core.graph import IndicatorGraph
from ...core.types import FlowType, Indicator
from ..utils import STATUS_COLORS, load_graph

console = Console()


def _label(indicator: Indicator) -> str:
    color = STATUS_COLORS[indicator.status]
    star = " [bold yellow]*[/bold yellow]" if indicator.is_primary else ""
    value = indicator.formatted_value or "-"
    target = indicator.formatted_target or "-"
    variation = f" ({indicator.variation})" if indicator.variation else ""
    return (
        f"[{color}]{indicator.name}[/{color}]{star} "
        f"[dim]{value} / {target}{variation}[/dim]"
    )


def _add_children(node: Tree, graph: IndicatorGraph, parent: Indicator) -> None:
    for child in graph.children_of(parent.id, parent.flow_type):
        _add_children(node.add(_label(child)), graph, child)


def build_flow_tree(graph: IndicatorGraph, flow_type: FlowType) -> Tree:
    root_tree = Tree(f"[bold]{flow_type.value}[/bold]")
    for root in graph.root_indicators(flow_type):
        _add_children(root_tree.add(_label(root)), graph, root)
    return root_tree


@click.command()
@click.option("--flow", "flow", type=click.Choice([f.value for f in FlowType]),
              default=None, help="Only show one flow")
def tree(flow: Optional[str]):
    """
    Show the indicator hierarchy.

    Green is above target, red below. * marks actionable indicators.
    """
    graph = load_graph()
    flows = [FlowType(flow)] if flow else list(FlowType)
    for flow_type in flows:
        console.print(build_flow_tree(graph, flow_type))
