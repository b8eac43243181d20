"""
Graph Command - Lay out the neighbourhood of one indicator.

Prints the force-layout nodes and links around a central indicator, or the
raw layout as JSON for a front end to draw.
"""

import contextlib
import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ...core.exceptions import IndicatorNotFoundError
from ...core.hierarchy import StaticHierarchyProvider
from ...core.types import FlowType
from ...graph.layout import ForceLayout, GraphLayout
from ..renderers import JsonRenderer
from ..utils import current_settings, echo_error

logger = logging.getLogger(__name__)

console = Console()


def _render_table(layout: GraphLayout) -> None:
    nodes = Table(title=f"{layout.central_id} ({layout.flow_type.value})")
    nodes.add_column("Indicator")
    nodes.add_column("Role")
    nodes.add_column("Status")
    nodes.add_column("Size", justify="right")
    nodes.add_column("x", justify="right")
    nodes.add_column("y", justify="right")
    for node in layout.nodes:
        nodes.add_row(
            node.name, node.role.value, node.status, str(node.size),
            f"{node.x:.1f}", f"{node.y:.1f}",
        )
    console.print(nodes)

    links = Table(title="Relations")
    links.add_column("Source")
    links.add_column("Target")
    links.add_column("Impact", justify="right")
    links.add_column("Kind")
    for link in layout.links:
        links.add_row(link.source, link.target, f"{link.value:.2f}", link.kind.value)
    console.print(links)


@click.command()
@click.argument("central_id")
@click.option("--flow", type=click.Choice([f.value for f in FlowType]),
              default=None, help="Flow to lay out  [default: from config]")
@click.option("--depth", default=None, type=click.IntRange(min=1),
              help="Relation hops around the central indicator  [default: from config]")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible layout")
@click.option("--json", "as_json", is_flag=True, help="Output the layout as JSON")
def graph(central_id: str, flow: Optional[str], depth: Optional[int], seed: Optional[int], as_json: bool):
    """
    Lay out the causal neighbourhood of CENTRAL_ID.

    Flow, depth and seed default to the project config.
    """
    settings = current_settings()
    flow = flow or settings.default_flow.value
    depth = depth or settings.graph_depth
    seed = seed if seed is not None else settings.seed
    renderer = JsonRenderer("graph")

    tree = StaticHierarchyProvider().load()
    with renderer.capture() if as_json else contextlib.nullcontext():
        layout = ForceLayout(tree, FlowType(flow), max_depth=depth, seed=seed).recenter(central_id)

    if not layout.nodes:
        error = IndicatorNotFoundError(central_id)
        if as_json:
            renderer.render_error(error)
        else:
            echo_error(f"{error} (flow '{flow}')")
        sys.exit(1)

    logger.debug("Layout for %s: %d nodes, %d links", central_id, len(layout.nodes), len(layout.links))

    if as_json:
        renderer.render_success(layout.to_dict())
    else:
        _render_table(layout)
