"""
Action-plan repository interface.

The indicator model stays pure; anything that mutates action plans goes
through a repository injected by the caller. Status transition rules live
here so every backend enforces the same lifecycle.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, FrozenSet, List, Optional

from ..exceptions import InvalidTransitionError
from ..types import ActionPlan, ActionPlanStatus, ValidationStatus

S = ActionPlanStatus

ALLOWED_TRANSITIONS: Dict[ActionPlanStatus, FrozenSet[ActionPlanStatus]] = {
    S.PENDING: frozenset({S.IN_PROGRESS, S.COMPLETED}),
    S.IN_PROGRESS: frozenset({S.PENDING, S.COMPLETED}),
    S.COMPLETED: frozenset({S.VALIDATED, S.REJECTED}),
    S.VALIDATED: frozenset(),
    S.REJECTED: frozenset({S.PENDING, S.IN_PROGRESS}),
}


def can_transition(current: ActionPlanStatus, requested: ActionPlanStatus) -> bool:
    """Same-status updates are accepted as no-ops."""
    return current == requested or requested in ALLOWED_TRANSITIONS[current]


class ActionPlanRepository(ABC):
    """
    Abstract storage for action plans.

    Subclasses implement ``get``, ``list`` and ``_save``; the lifecycle
    operations are shared. Every operation returns ``None`` for an unknown
    plan id instead of raising.
    """

    @abstractmethod
    def get(self, plan_id: str) -> Optional[ActionPlan]:
        """Load a plan by id."""

    @abstractmethod
    def list(self, indicator_id: Optional[str] = None) -> List[ActionPlan]:
        """All plans, or only those attached to ``indicator_id``."""

    @abstractmethod
    def _save(self, plan: ActionPlan) -> None:
        """Persist a full plan record, replacing any existing one."""

    def add(self, plan: ActionPlan) -> None:
        self._save(plan)

    def update_status(self, plan_id: str, status: ActionPlanStatus) -> Optional[ActionPlan]:
        """
        Move a plan to ``status``.

        Raises:
            InvalidTransitionError: if the lifecycle forbids the move.
        """
        plan = self.get(plan_id)
        if plan is None:
            return None
        status = ActionPlanStatus(status)
        if not can_transition(plan.status, status):
            raise InvalidTransitionError(plan_id, plan.status, status)
        return self._update(plan, status=status)

    def submit_validation_photo(self, plan_id: str, photo_uri: str) -> Optional[ActionPlan]:
        """
        Attach the execution photo and queue the plan for validation.

        The plan is marked completed; validation stays pending until
        ``validate_execution`` runs. Earlier releases reset the plan to
        pending here, which left nothing for validation to act on.
        """
        plan = self.get(plan_id)
        if plan is None:
            return None
        if plan.status == S.VALIDATED:
            raise InvalidTransitionError(plan_id, plan.status, S.COMPLETED)
        return self._update(
            plan,
            status=S.COMPLETED,
            execution_photo=photo_uri,
            validation_status=ValidationStatus.PENDING,
            validation_feedback=None,
        )

    def validate_execution(
        self,
        plan_id: str,
        approved: bool,
        feedback: Optional[str] = None,
    ) -> Optional[ActionPlan]:
        """Back-office approval or rejection of a completed plan."""
        plan = self.get(plan_id)
        if plan is None:
            return None
        status = S.VALIDATED if approved else S.REJECTED
        if plan.status != S.COMPLETED:
            raise InvalidTransitionError(plan_id, plan.status, status)
        return self._update(
            plan,
            status=status,
            validation_status=ValidationStatus.APPROVED if approved else ValidationStatus.REJECTED,
            validation_feedback=feedback,
        )

    def _update(self, plan: ActionPlan, **changes) -> ActionPlan:
        changes["updated_at"] = datetime.now(timezone.utc)
        updated = plan.model_copy(update=changes)
        self._save(updated)
        return updated
