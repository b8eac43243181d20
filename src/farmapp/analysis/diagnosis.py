"""
Flow Diagnosis.

Walks one flow of the indicator graph and collects what a store manager
needs to act on: the indicators below target, and for the actionable ones
their recommendations, open action plans and the causal chain that links
them to the flow's root.
"""

import logging
from typing import Any, Dict, List, Optional

from ..core.graph import IndicatorGraph
from ..core.lookup import LookupService
from ..core.storage.base import ActionPlanRepository
from ..core.types import FlowType, Indicator, IndicatorStatus

logger = logging.getLogger(__name__)


class DiagnosisAnalyzer:
    """
    Explains why a flow's root indicator is off target.
    """

    def __init__(
        self,
        graph: IndicatorGraph,
        plans: Optional[ActionPlanRepository] = None,
        lookup: Optional[LookupService] = None,
    ):
        self.graph = graph
        self.plans = plans
        self.lookup = lookup or LookupService()

    def diagnose(self, flow_type: FlowType) -> Dict[str, Any]:
        flow_type = FlowType(flow_type)
        roots = self.graph.root_indicators(flow_type)
        root = roots[0] if roots else None

        below = [
            ind for ind in self.graph.indicators(flow_type)
            if ind.status == IndicatorStatus.BELOW
        ]
        actionable = [self._explain(ind, root) for ind in below if ind.is_primary]

        logger.debug(
            "Diagnosed flow %s: %d below target, %d actionable",
            flow_type, len(below), len(actionable),
        )

        return {
            "flow_type": flow_type.value,
            "root": self._summary(root) if root else None,
            "below_target": [ind.id for ind in below],
            "below_target_count": len(below),
            "actionable": actionable,
        }

    def _explain(self, indicator: Indicator, root: Optional[Indicator]) -> Dict[str, Any]:
        chains: List[List[str]] = []
        if root is not None:
            chains = self.graph.trace(indicator.id, root.id, indicator.flow_type)

        plans = self.plans.list(indicator.id) if self.plans else []

        return {
            **self._summary(indicator),
            "recommendations": [r.model_dump(mode="json") for r in self.lookup.recommendations(indicator.id)],
            "action_plans": [
                {"id": p.id, "title": p.title, "status": p.status.value, "priority": p.priority.value}
                for p in plans
            ],
            "causes": self.lookup.causes(indicator.id),
            "chain_to_root": chains[0] if chains else [],
        }

    @staticmethod
    def _summary(indicator: Indicator) -> Dict[str, Any]:
        return {
            "id": indicator.id,
            "name": indicator.name,
            "status": indicator.status.value,
            "value": indicator.formatted_value,
            "target": indicator.formatted_target,
            "variation": indicator.variation,
        }
