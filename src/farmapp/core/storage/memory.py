"""
In-memory action-plan repository.

Fast ephemeral storage for tests and for the built-in demo data. Each
instance owns its own copy of the plans.
"""

from typing import Dict, Iterable, List, Optional

from ..types import ActionPlan
from .base import ActionPlanRepository
from .seed import default_action_plans


class MemoryActionPlanRepository(ActionPlanRepository):

    def __init__(self, plans: Optional[Iterable[ActionPlan]] = None):
        if plans is None:
            plans = default_action_plans()
        self._plans: Dict[str, ActionPlan] = {plan.id: plan for plan in plans}

    def get(self, plan_id: str) -> Optional[ActionPlan]:
        return self._plans.get(plan_id)

    def list(self, indicator_id: Optional[str] = None) -> List[ActionPlan]:
        return [
            plan for plan in self._plans.values()
            if indicator_id is None or plan.indicator_id == indicator_id
        ]

    def _save(self, plan: ActionPlan) -> None:
        self._plans[plan.id] = plan

    def clear(self) -> None:
        self._plans.clear()
