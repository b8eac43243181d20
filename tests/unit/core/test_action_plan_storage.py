"""
Unit tests for the action-plan repositories.

Both backends share the lifecycle logic, so most tests run against each.
"""

import pytest

from farmapp.core.exceptions import InvalidTransitionError
from farmapp.core.storage import (
    MemoryActionPlanRepository,
    SQLiteActionPlanRepository,
    can_transition,
    default_action_plans,
)
from farmapp.core.types import ActionPlan, ActionPlanStatus, ValidationStatus

S = ActionPlanStatus


@pytest.fixture(params=["memory", "sqlite"])
def repo(request, tmp_path):
    if request.param == "memory":
        return MemoryActionPlanRepository()
    return SQLiteActionPlanRepository(tmp_path / "plans.db")


class TestTransitions:

    @pytest.mark.parametrize("current, requested", [
        (S.PENDING, S.IN_PROGRESS),
        (S.PENDING, S.COMPLETED),
        (S.IN_PROGRESS, S.COMPLETED),
        (S.IN_PROGRESS, S.PENDING),
        (S.COMPLETED, S.VALIDATED),
        (S.COMPLETED, S.REJECTED),
        (S.REJECTED, S.IN_PROGRESS),
        (S.PENDING, S.PENDING),
    ])
    def test_allowed(self, current, requested):
        assert can_transition(current, requested)

    @pytest.mark.parametrize("current, requested", [
        (S.PENDING, S.VALIDATED),
        (S.IN_PROGRESS, S.REJECTED),
        (S.VALIDATED, S.PENDING),
        (S.COMPLETED, S.PENDING),
    ])
    def test_forbidden(self, current, requested):
        assert not can_transition(current, requested)


class TestRepository:

    def test_seeded_with_default_plans(self, repo):
        assert len(repo.list()) == len(default_action_plans()) == 12

    def test_list_by_indicator(self, repo):
        ids = [p.id for p in repo.list("uvc")]
        assert ids == ["ajuste-estoque-001", "cross-selling-002", "pacotes-promo-003"]

    def test_list_unknown_indicator(self, repo):
        assert repo.list("ghost") == []

    def test_get(self, repo):
        plan = repo.get("pacotes-promo-003")
        assert plan.indicator_id == "uvc"
        assert plan.status == S.IN_PROGRESS
        assert plan.steps

    def test_unknown_plan_returns_none(self, repo):
        assert repo.get("ghost") is None
        assert repo.update_status("ghost", S.IN_PROGRESS) is None
        assert repo.submit_validation_photo("ghost", "photo.jpg") is None
        assert repo.validate_execution("ghost", approved=True) is None

    def test_update_status_persists(self, repo):
        updated = repo.update_status("ajuste-estoque-001", S.IN_PROGRESS)

        assert updated.status == S.IN_PROGRESS
        assert repo.get("ajuste-estoque-001").status == S.IN_PROGRESS
        assert updated.updated_at >= updated.created_at

    def test_update_status_accepts_string(self, repo):
        assert repo.update_status("ajuste-estoque-001", "completed").status == S.COMPLETED

    def test_same_status_is_noop(self, repo):
        assert repo.update_status("ajuste-estoque-001", S.PENDING).status == S.PENDING

    def test_invalid_transition_raises(self, repo):
        with pytest.raises(InvalidTransitionError) as exc_info:
            repo.update_status("ajuste-estoque-001", S.VALIDATED)

        assert exc_info.value.plan_id == "ajuste-estoque-001"
        assert repo.get("ajuste-estoque-001").status == S.PENDING

    def test_submit_validation_photo(self, repo):
        plan = repo.submit_validation_photo("cross-selling-002", "file:///photo.jpg")

        assert plan.status == S.COMPLETED
        assert plan.validation_status == ValidationStatus.PENDING
        assert plan.execution_photo == "file:///photo.jpg"
        assert repo.get("cross-selling-002").execution_photo == "file:///photo.jpg"

    def test_approve(self, repo):
        repo.submit_validation_photo("cross-selling-002", "photo.jpg")
        plan = repo.validate_execution("cross-selling-002", approved=True)

        assert plan.status == S.VALIDATED
        assert plan.validation_status == ValidationStatus.APPROVED

        with pytest.raises(InvalidTransitionError):
            repo.update_status("cross-selling-002", S.PENDING)
        with pytest.raises(InvalidTransitionError):
            repo.submit_validation_photo("cross-selling-002", "again.jpg")

    def test_reject_and_rework(self, repo):
        repo.submit_validation_photo("cross-selling-002", "photo.jpg")
        plan = repo.validate_execution("cross-selling-002", approved=False, feedback="Foto ilegível")

        assert plan.status == S.REJECTED
        assert plan.validation_status == ValidationStatus.REJECTED
        assert plan.validation_feedback == "Foto ilegível"

        reworked = repo.update_status("cross-selling-002", S.IN_PROGRESS)
        assert reworked.status == S.IN_PROGRESS

    def test_validate_requires_completed(self, repo):
        with pytest.raises(InvalidTransitionError):
            repo.validate_execution("ajuste-estoque-001", approved=True)

    def test_add(self, repo):
        repo.add(ActionPlan(id="new-001", indicator_id="ruptura", title="T", description="D"))
        assert repo.get("new-001").status == S.PENDING
        assert len(repo.list("ruptura")) == 3


class TestMemoryRepository:

    def test_instances_are_independent(self):
        first = MemoryActionPlanRepository()
        second = MemoryActionPlanRepository()

        first.update_status("ajuste-estoque-001", S.IN_PROGRESS)

        assert second.get("ajuste-estoque-001").status == S.PENDING

    def test_explicit_plans(self):
        repo = MemoryActionPlanRepository(plans=[])
        assert repo.list() == []

    def test_clear(self):
        repo = MemoryActionPlanRepository()
        repo.clear()
        assert repo.list() == []


class TestSQLiteRepository:

    def test_schema_version(self, tmp_path):
        repo = SQLiteActionPlanRepository(tmp_path / "plans.db")
        assert repo.get_schema_version() == 1

    def test_persists_across_instances(self, tmp_path):
        db = tmp_path / "plans.db"
        SQLiteActionPlanRepository(db).update_status("mix-premium-001", S.IN_PROGRESS)

        reopened = SQLiteActionPlanRepository(db)
        assert reopened.get("mix-premium-001").status == S.IN_PROGRESS
        assert reopened.count() == 12

    def test_no_seed(self, tmp_path):
        repo = SQLiteActionPlanRepository(tmp_path / "plans.db", seed=False)
        assert repo.count() == 0

    def test_round_trip_keeps_lists(self, tmp_path):
        repo = SQLiteActionPlanRepository(tmp_path / "plans.db")
        original = next(p for p in default_action_plans() if p.id == "ajuste-estoque-001")
        stored = repo.get("ajuste-estoque-001")
        assert stored.steps == original.steps
        assert stored.products == original.products

    def test_creates_parent_directory(self, tmp_path):
        db = tmp_path / "nested" / "dir" / "plans.db"
        SQLiteActionPlanRepository(db)
        assert db.exists()
