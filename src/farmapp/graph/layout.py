"""
Force-directed layout for the interactive indicator graph.

Given a flow and a central indicator, builds the neighbourhood node/link set,
tags every node with its structural role and runs a spring simulation
(rustworkx Fruchterman-Reingold) with the central node pinned in the middle
of the canvas.

Roles by causal distance from the central node:
    central   - the focal indicator
    primary   - one relation away
    secondary - two relations away
    context   - anything further (only with max_depth > 2)

Re-centering rebuilds roles and restarts the simulation from scratch.
"""

import logging
from enum import StrEnum
from typing import Any, Dict, Iterable, List, Optional

import rustworkx as rx
from pydantic import BaseModel, Field

from ..config import (
    DEFAULT_GRAPH_DEPTH,
    LAYOUT_HEIGHT,
    LAYOUT_ITERATIONS,
    LAYOUT_WIDTH,
    NODE_SIZES,
)
from ..core.graph import IndicatorGraph
from ..core.types import FlowType, Indicator, IndicatorTree, Relation

logger = logging.getLogger(__name__)

# Fraction of the half-canvas the unit-scale layout is stretched to
_SPREAD = 0.8


class NodeRole(StrEnum):
    CENTRAL = "central"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    CONTEXT = "context"


class LinkKind(StrEnum):
    DIRECT = "direct"
    INDIRECT = "indirect"


def role_for_distance(distance: int) -> NodeRole:
    if distance == 0:
        return NodeRole.CENTRAL
    if distance == 1:
        return NodeRole.PRIMARY
    if distance == 2:
        return NodeRole.SECONDARY
    return NodeRole.CONTEXT


class LayoutNode(BaseModel):
    id: str
    name: str
    status: str
    role: NodeRole
    size: int
    x: float = 0.0
    y: float = 0.0
    fixed: bool = False


class LayoutLink(BaseModel):
    source: str
    target: str
    value: float
    kind: LinkKind


class GraphLayout(BaseModel):
    central_id: str
    flow_type: FlowType
    width: float = LAYOUT_WIDTH
    height: float = LAYOUT_HEIGHT
    nodes: List[LayoutNode] = Field(default_factory=list)
    links: List[LayoutLink] = Field(default_factory=list)

    def node(self, node_id: str) -> Optional[LayoutNode]:
        return next((n for n in self.nodes if n.id == node_id), None)

    def roles(self) -> Dict[str, NodeRole]:
        return {n.id: n.role for n in self.nodes}

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json")


def build_layout(
    indicators: Iterable[Indicator],
    relations: Iterable[Relation],
    central_id: str,
    flow_type: FlowType,
    max_depth: int = DEFAULT_GRAPH_DEPTH,
    seed: Optional[int] = None,
    width: float = LAYOUT_WIDTH,
    height: float = LAYOUT_HEIGHT,
    iterations: int = LAYOUT_ITERATIONS,
) -> GraphLayout:
    """
    Lay out the neighbourhood of ``central_id`` within one flow.

    An unknown central id (or one outside the flow) produces an empty layout.
    """
    flow_type = FlowType(flow_type)
    graph = IndicatorGraph.from_tree(
        IndicatorTree(
            indicators=[i for i in indicators if i.flow_type == flow_type],
            relations=[r for r in relations if r.flow_type == flow_type],
        )
    )
    layout = GraphLayout(central_id=central_id, flow_type=flow_type, width=width, height=height)

    central = graph.get_indicator(central_id, flow_type)
    if central is None:
        logger.debug("Central indicator %s not in flow %s", central_id, flow_type)
        return layout

    members = [(central, 0)] + graph.hop_distances(central_id, flow_type, max_depth)
    for indicator, distance in members:
        role = role_for_distance(distance)
        layout.nodes.append(
            LayoutNode(
                id=indicator.id,
                name=indicator.name,
                status=indicator.status.value,
                role=role,
                size=NODE_SIZES[role.value],
                fixed=role == NodeRole.CENTRAL,
            )
        )

    member_ids = {n.id for n in layout.nodes}
    for rel in graph.relations(flow_type):
        if rel.source_id in member_ids and rel.target_id in member_ids:
            kind = LinkKind.DIRECT if rel.touches(central_id) else LinkKind.INDIRECT
            layout.links.append(
                LayoutLink(source=rel.source_id, target=rel.target_id, value=rel.impact, kind=kind)
            )

    _simulate(layout, seed=seed, iterations=iterations)
    return layout


def _simulate(layout: GraphLayout, seed: Optional[int], iterations: int) -> None:
    """Assign coordinates in place; the central node stays at the canvas centre."""
    sim = rx.PyGraph()
    index: Dict[str, int] = {}
    for node in layout.nodes:
        index[node.id] = sim.add_node(node.id)
    for link in layout.links:
        sim.add_edge(index[link.source], index[link.target], link.value)

    central_idx = index[layout.central_id]
    positions = rx.spring_layout(
        sim,
        pos={central_idx: [0.0, 0.0]},
        fixed={central_idx},
        weight_fn=lambda impact: impact,
        num_iter=iterations,
        seed=seed,
    )

    cx, cy = layout.width / 2, layout.height / 2
    for node in layout.nodes:
        x, y = positions[index[node.id]]
        if node.fixed:
            x, y = 0.0, 0.0
        node.x = cx + x * cx * _SPREAD
        node.y = cy + y * cy * _SPREAD


class ForceLayout:
    """
    Holds one loaded tree and produces layouts on demand.

    Each ``recenter`` call is a full rebuild; nothing is carried over from the
    previous layout.
    """

    def __init__(
        self,
        tree: IndicatorTree,
        flow_type: FlowType,
        max_depth: int = DEFAULT_GRAPH_DEPTH,
        seed: Optional[int] = None,
    ):
        self.tree = tree
        self.flow_type = FlowType(flow_type)
        self.max_depth = max_depth
        self.seed = seed
        self.current: Optional[GraphLayout] = None

    def recenter(self, central_id: str) -> GraphLayout:
        self.current = build_layout(
            self.tree.indicators,
            self.tree.relations,
            central_id,
            self.flow_type,
            max_depth=self.max_depth,
            seed=self.seed,
        )
        return self.current

    def reset(self) -> GraphLayout:
        """Re-center on the flow's root indicator."""
        root = next(
            (i for i in self.tree.indicators if i.flow_type == self.flow_type and i.is_root),
            None,
        )
        return self.recenter(root.id if root else "")
