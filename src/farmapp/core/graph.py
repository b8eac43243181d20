"""
Indicator Graph implementation backed by rustworkx.

It manages:
- The bimap between (flow, indicator id) keys and rustworkx integer indices.
- Indicator payloads on nodes, Relation payloads on causal edges.
- The display hierarchy (``parent_id``), kept apart from the causal edges.
- Bounded traversal for seeding the interactive graph view.

Indicator ids are only unique within a flow, so every node is keyed by
``(flow_type, id)``. Id-only lookups resolve across flows in load order.
"""

import logging
from collections import Counter, defaultdict, deque
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

import rustworkx as rx

from .types import FlowType, Indicator, IndicatorTree, Relation, RelationSet

logger = logging.getLogger(__name__)

NodeKey = Tuple[FlowType, str]


class IndicatorGraph:
    """
    Indicator causality graph.

    Features:
    - O(1) indicator lookup via key-to-index bimap
    - Parent/child queries from the display hierarchy
    - Incoming/outgoing causal queries from the relation edges
    - Depth-bounded, deduplicated neighbourhood expansion
    """

    def __init__(self):
        self._graph = rx.PyDiGraph(multigraph=True)
        self._key_to_idx: Dict[NodeKey, int] = {}
        self._idx_to_key: Dict[int, NodeKey] = {}
        self._flows_by_id: Dict[str, List[FlowType]] = defaultdict(list)
        self._dangling: List[Relation] = []
        self._duplicates: List[NodeKey] = []

    @classmethod
    def from_tree(cls, tree: IndicatorTree) -> "IndicatorGraph":
        graph = cls()
        for indicator in tree.indicators:
            graph.add_indicator(indicator)
        for relation in tree.relations:
            graph.add_relation(relation)
        return graph

    # =========================================================================
    # Construction
    # =========================================================================

    def add_indicator(self, indicator: Indicator) -> None:
        """Add or replace an indicator."""
        key = (indicator.flow_type, indicator.id)
        if key in self._key_to_idx:
            logger.warning("Duplicate indicator %s in flow %s", indicator.id, indicator.flow_type)
            self._duplicates.append(key)
            self._graph[self._key_to_idx[key]] = indicator
            return

        idx = self._graph.add_node(indicator)
        self._key_to_idx[key] = idx
        self._idx_to_key[idx] = key
        self._flows_by_id[indicator.id].append(indicator.flow_type)

    def add_relation(self, relation: Relation) -> None:
        """
        Add a causal edge inside the relation's own flow.

        Edges whose endpoints are missing from that flow are kept aside for
        ``validate`` and never enter the graph.
        """
        u = self._key_to_idx.get((relation.flow_type, relation.source_id))
        v = self._key_to_idx.get((relation.flow_type, relation.target_id))
        if u is None or v is None:
            logger.debug(
                "Skipping dangling relation %s -> %s (%s)",
                relation.source_id, relation.target_id, relation.flow_type,
            )
            self._dangling.append(relation)
            return
        self._graph.add_edge(u, v, relation)

    # =========================================================================
    # Lookup
    # =========================================================================

    def _indices(self, indicator_id: str, flow_type: Optional[FlowType] = None) -> List[int]:
        flows = self._flows_by_id.get(indicator_id, [])
        return [
            self._key_to_idx[(flow, indicator_id)]
            for flow in flows
            if flow_type is None or flow == flow_type
        ]

    def get_indicator(self, indicator_id: str, flow_type: Optional[FlowType] = None) -> Optional[Indicator]:
        """Retrieve an indicator by id, optionally pinned to a flow."""
        indices = self._indices(indicator_id, flow_type)
        if not indices:
            return None
        return self._graph[indices[0]]

    def has_indicator(self, indicator_id: str, flow_type: Optional[FlowType] = None) -> bool:
        return bool(self._indices(indicator_id, flow_type))

    def flows_of(self, indicator_id: str) -> List[FlowType]:
        return list(self._flows_by_id.get(indicator_id, []))

    def indicators(self, flow_type: Optional[FlowType] = None) -> List[Indicator]:
        return [
            ind for ind in self._graph.nodes()
            if flow_type is None or ind.flow_type == flow_type
        ]

    def relations(self, flow_type: Optional[FlowType] = None) -> List[Relation]:
        return [
            rel for rel in self._graph.edges()
            if flow_type is None or rel.flow_type == flow_type
        ]

    # =========================================================================
    # Display hierarchy
    # =========================================================================

    def root_indicators(self, flow_type: Optional[FlowType] = None) -> List[Indicator]:
        """Indicators without a parent, optionally restricted to one flow."""
        return [ind for ind in self.indicators(flow_type) if ind.parent_id is None]

    def children_of(self, parent_id: str, flow_type: Optional[FlowType] = None) -> List[Indicator]:
        """Indicators whose ``parent_id`` points at ``parent_id``."""
        return [ind for ind in self.indicators(flow_type) if ind.parent_id == parent_id]

    def parent_of(self, child_id: str, flow_type: Optional[FlowType] = None) -> Optional[Indicator]:
        """Parent of an indicator in the display hierarchy, within the child's flow."""
        child = self.get_indicator(child_id, flow_type)
        if child is None or child.parent_id is None:
            return None
        return self.get_indicator(child.parent_id, child.flow_type)

    # =========================================================================
    # Causal relations
    # =========================================================================

    def relations_of(self, indicator_id: str, flow_type: Optional[FlowType] = None) -> RelationSet:
        """
        Edges where the indicator is the target (incoming) or source (outgoing).

        The flow filter applies to the relation's own ``flow_type``.
        """
        incoming: List[Relation] = []
        outgoing: List[Relation] = []
        for idx in self._indices(indicator_id):
            for _, _, rel in self._graph.in_edges(idx):
                if flow_type is None or rel.flow_type == flow_type:
                    incoming.append(rel)
            for _, _, rel in self._graph.out_edges(idx):
                if flow_type is None or rel.flow_type == flow_type:
                    outgoing.append(rel)
        return RelationSet(incoming=incoming, outgoing=outgoing)

    def causal_sources_of(self, target_id: str, flow_type: Optional[FlowType] = None) -> List[Indicator]:
        """
        Indicators with a causal edge into ``target_id`` ("influenced by").

        This is not ``children_of``: relation edges may skip tree levels or
        cross branches.
        """
        sources: List[Indicator] = []
        seen: Set[int] = set()
        for idx in self._indices(target_id, flow_type):
            for source_idx, _, _ in self._graph.in_edges(idx):
                if source_idx not in seen:
                    seen.add(source_idx)
                    sources.append(self._graph[source_idx])
        return sources

    def causal_targets_of(self, source_id: str, flow_type: Optional[FlowType] = None) -> List[Indicator]:
        """Indicators that ``source_id`` has a causal edge into."""
        targets: List[Indicator] = []
        seen: Set[int] = set()
        for idx in self._indices(source_id, flow_type):
            for _, target_idx, _ in self._graph.out_edges(idx):
                if target_idx not in seen:
                    seen.add(target_idx)
                    targets.append(self._graph[target_idx])
        return targets

    def hop_distances(
        self,
        indicator_id: str,
        flow_type: Optional[FlowType] = None,
        max_depth: int = 2,
    ) -> List[Tuple[Indicator, int]]:
        """
        Indicators within ``max_depth`` causal hops, paired with their distance.

        Breadth-first over relation edges in both directions. The start
        indicator is excluded and every indicator appears once, at its
        shortest distance, in the order it was first reached.
        """
        start = self._indices(indicator_id, flow_type)
        if not start or max_depth <= 0:
            return []

        visited: Set[int] = set(start)
        queue = deque((idx, 0) for idx in start)
        found: List[Tuple[int, int]] = []

        while queue:
            current, depth = queue.popleft()
            if depth >= max_depth:
                continue

            neighbours = [
                (source_idx, rel) for source_idx, _, rel in self._graph.in_edges(current)
            ] + [
                (target_idx, rel) for _, target_idx, rel in self._graph.out_edges(current)
            ]
            for neighbour, rel in neighbours:
                if flow_type is not None and rel.flow_type != flow_type:
                    continue
                if neighbour in visited:
                    continue
                visited.add(neighbour)
                found.append((neighbour, depth + 1))
                queue.append((neighbour, depth + 1))

        return [(self._graph[idx], depth) for idx, depth in found]

    def transitive_related(
        self,
        indicator_id: str,
        flow_type: Optional[FlowType] = None,
        max_depth: int = 2,
    ) -> List[Indicator]:
        """
        Indicators within ``max_depth`` causal hops of ``indicator_id``,
        deduplicated, start excluded. Seeds the interactive graph view.
        """
        return [ind for ind, _ in self.hop_distances(indicator_id, flow_type, max_depth)]

    def trace(
        self,
        source_id: str,
        target_id: str,
        flow_type: Optional[FlowType] = None,
        cutoff: int = 10,
    ) -> List[List[str]]:
        """
        Causal paths from source to target, following edge direction.

        Paths are lists of indicator ids, shortest first.
        """
        paths: List[List[str]] = []
        for src_idx in self._indices(source_id, flow_type):
            src_flow = self._idx_to_key[src_idx][0]
            tgt_idx = self._key_to_idx.get((src_flow, target_id))
            if tgt_idx is None or tgt_idx == src_idx:
                continue
            for path in rx.all_simple_paths(self._graph, src_idx, tgt_idx, cutoff=cutoff):
                paths.append([self._idx_to_key[idx][1] for idx in path])
        return sorted(paths, key=len)

    # =========================================================================
    # Actionability
    # =========================================================================

    def is_actionable(self, indicator_id: str) -> bool:
        """True iff the indicator exists and carries ``is_primary``."""
        indicator = self.get_indicator(indicator_id)
        return indicator is not None and indicator.is_primary

    def primary_indicators(self, flow_type: Optional[FlowType] = None) -> List[Indicator]:
        return [ind for ind in self.indicators(flow_type) if ind.is_primary]

    # =========================================================================
    # Integrity & export
    # =========================================================================

    def validate(self) -> List[str]:
        """
        Check the structural invariants of a loaded tree.

        Returns a list of human-readable problems; empty means valid.
        """
        problems: List[str] = []

        for flow, ind_id in self._duplicates:
            problems.append(f"duplicate indicator '{ind_id}' in flow '{flow}'")

        for ind in self.indicators():
            if ind.parent_id is None:
                continue
            if not self.has_indicator(ind.parent_id, ind.flow_type):
                if self.has_indicator(ind.parent_id):
                    problems.append(
                        f"indicator '{ind.id}' has parent '{ind.parent_id}' in a different flow"
                    )
                else:
                    problems.append(f"indicator '{ind.id}' has unknown parent '{ind.parent_id}'")

        for rel in self._dangling:
            problems.append(
                f"relation {rel.source_id} -> {rel.target_id} does not match flow '{rel.flow_type}'"
            )

        roots = Counter(ind.flow_type for ind in self.root_indicators())
        for flow in {ind.flow_type for ind in self.indicators()}:
            if roots[flow] != 1:
                problems.append(f"flow '{flow}' has {roots[flow]} root indicators, expected 1")

        return problems

    def iter_indicators(self) -> Iterator[Indicator]:
        return iter(self._graph.nodes())

    def iter_relations(self) -> Iterator[Relation]:
        return iter(self._graph.edges())

    @property
    def indicator_count(self) -> int:
        return self._graph.num_nodes()

    @property
    def relation_count(self) -> int:
        return self._graph.num_edges()

    def get_stats(self) -> Dict[str, Any]:
        by_flow: Dict[str, Dict[str, int]] = {}
        for flow in FlowType:
            by_flow[flow.value] = {
                "indicators": len(self.indicators(flow)),
                "relations": len(self.relations(flow)),
                "primary": len(self.primary_indicators(flow)),
            }
        return {
            "total_indicators": self.indicator_count,
            "total_relations": self.relation_count,
            "flows": by_flow,
            "backend": "rustworkx",
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "indicators": [ind.model_dump(mode="json") for ind in self.iter_indicators()],
            "relations": [rel.model_dump(mode="json") for rel in self.iter_relations()],
            "stats": self.get_stats(),
        }
