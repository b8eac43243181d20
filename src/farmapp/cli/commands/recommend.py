"""
Recommend Command - Remediation suggestions for an indicator.
"""

import click
from rich.console import Console
from rich.table import Table

from ...core.lookup import recommendations_for
from ..utils import echo_info, echo_warning, load_graph

console = Console()

PRIORITY_COLORS = {"high": "red", "medium": "yellow", "low": "green"}


@click.command()
@click.argument("indicator_id")
def recommend(indicator_id: str):
    """
    List recommendations for INDICATOR_ID.
    """
    recommendations = recommendations_for(indicator_id)
    if not recommendations:
        echo_warning(f"No recommendations for {indicator_id}")
        if not load_graph().is_actionable(indicator_id):
            echo_info("Recommendations exist only for actionable indicators. See 'farmapp tree'.")
        return

    table = Table(title=f"Recommendations: {indicator_id}")
    table.add_column("Priority")
    table.add_column("Recommendation")
    table.add_column("Expected impact")
    table.add_column("Action plan", style="cyan")
    for rec in recommendations:
        color = PRIORITY_COLORS.get(rec.priority.value, "white")
        table.add_row(
            f"[{color}]{rec.priority.value}[/{color}]",
            f"[bold]{rec.title}[/bold]\n{rec.description}",
            rec.impact,
            rec.action_plan_id or "-",
        )
    console.print(table)
