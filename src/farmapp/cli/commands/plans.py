"""
Plans Command Group - Inspect and advance action plans.

Plans live in a SQLite file (``.farmapp/farmapp.db`` by default) that is
seeded with the built-in plans on first use.

Lifecycle:
    pending -> in_progress -> completed -> validated | rejected
"""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...core.exceptions import ActionPlanNotFoundError, FarmAppError
from ...core.types import ActionPlan, ActionPlanStatus
from ..utils import echo_error, echo_success, open_plan_repository

console = Console()

STATUS_COLORS = {
    ActionPlanStatus.PENDING: "yellow",
    ActionPlanStatus.IN_PROGRESS: "cyan",
    ActionPlanStatus.COMPLETED: "blue",
    ActionPlanStatus.VALIDATED: "green",
    ActionPlanStatus.REJECTED: "red",
}

db_option = click.option("-d", "--db", "db_path", default=None,
                         help="Path to the action-plan database")


def _status(plan: ActionPlan) -> str:
    color = STATUS_COLORS[plan.status]
    return f"[{color}]{plan.status.value}[/{color}]"


@click.group()
def plans():
    """Manage action plans."""


@plans.command("list")
@click.option("-i", "--indicator", "indicator_id", default=None, help="Only plans for this indicator")
@db_option
def list_plans(indicator_id: Optional[str], db_path: Optional[str]):
    """List action plans."""
    repo = open_plan_repository(db_path)
    table = Table(title="Action plans")
    table.add_column("ID", style="cyan")
    table.add_column("Indicator")
    table.add_column("Title")
    table.add_column("Priority")
    table.add_column("Status")
    for plan in repo.list(indicator_id):
        table.add_row(plan.id, plan.indicator_id, plan.title, plan.priority.value, _status(plan))
    console.print(table)


@plans.command("show")
@click.argument("plan_id")
@db_option
def show_plan(plan_id: str, db_path: Optional[str]):
    """Show one action plan with its steps."""
    plan = open_plan_repository(db_path).get(plan_id)
    if plan is None:
        echo_error(str(ActionPlanNotFoundError(plan_id)))
        sys.exit(1)

    lines = [
        plan.description,
        "",
        f"Indicator: {plan.indicator_id}   Priority: {plan.priority.value}   Deadline: {plan.deadline or '-'}",
        f"Status: {_status(plan)}",
    ]
    if plan.validation_status:
        lines.append(f"Validation: {plan.validation_status.value}")
    if plan.validation_feedback:
        lines.append(f"Feedback: {plan.validation_feedback}")
    if plan.steps:
        lines += ["", "[bold]Steps[/bold]"]
        lines += [f"  {n}. {step}" for n, step in enumerate(plan.steps, start=1)]
    if plan.products:
        lines += ["", "[bold]Products[/bold]"]
        lines += [f"  • {product}" for product in plan.products]

    console.print(Panel("\n".join(lines), title=f"[bold]{plan.title}[/bold] ({plan.id})"))


@plans.command("update")
@click.argument("plan_id")
@click.argument("status", type=click.Choice([s.value for s in ActionPlanStatus]))
@db_option
def update_plan(plan_id: str, status: str, db_path: Optional[str]):
    """Move PLAN_ID to STATUS."""
    repo = open_plan_repository(db_path)
    try:
        plan = repo.update_status(plan_id, ActionPlanStatus(status))
        if plan is None:
            raise ActionPlanNotFoundError(plan_id)
    except FarmAppError as e:
        echo_error(str(e))
        sys.exit(1)
    echo_success(f"{plan.id} is now {plan.status.value}")


@plans.command("submit")
@click.argument("plan_id")
@click.argument("photo")
@db_option
def submit_plan(plan_id: str, photo: str, db_path: Optional[str]):
    """Attach the execution PHOTO and send PLAN_ID for validation."""
    repo = open_plan_repository(db_path)
    try:
        plan = repo.submit_validation_photo(plan_id, photo)
        if plan is None:
            raise ActionPlanNotFoundError(plan_id)
    except FarmAppError as e:
        echo_error(str(e))
        sys.exit(1)
    echo_success(f"{plan.id} submitted for validation")


@plans.command("validate")
@click.argument("plan_id")
@click.option("--approve/--reject", "approved", required=True, help="Validation outcome")
@click.option("--feedback", default=None, help="Feedback for the store")
@db_option
def validate_plan(plan_id: str, approved: bool, feedback: Optional[str], db_path: Optional[str]):
    """Approve or reject a completed PLAN_ID."""
    repo = open_plan_repository(db_path)
    try:
        plan = repo.validate_execution(plan_id, approved, feedback)
        if plan is None:
            raise ActionPlanNotFoundError(plan_id)
    except FarmAppError as e:
        echo_error(str(e))
        sys.exit(1)
    echo_success(f"{plan.id} is now {plan.status.value}")
