"""
Sellers Command - Team leaderboard.
"""

import random
import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ...config import DEFAULT_HISTORY_DAYS, MAX_HISTORY_DAYS
from ...core.exceptions import SellerNotFoundError
from ...core.sellers import SellerRepository, format_seller_metrics
from ...core.types import SellerStatus
from ...utils.formatters import format_currency, format_number
from ..renderers import JsonRenderer
from ..utils import current_settings, echo_error

console = Console()

STATUS_COLORS = {
    SellerStatus.ABOVE_TARGET: "green",
    SellerStatus.ON_TARGET: "cyan",
    SellerStatus.BELOW_TARGET: "yellow",
    SellerStatus.CRITICAL: "red",
}


@click.command()
@click.argument("seller_id", required=False)
@click.option("--days", default=DEFAULT_HISTORY_DAYS, show_default=True,
              type=click.IntRange(1, MAX_HISTORY_DAYS), help="History length for SELLER_ID")
@click.option("--seed", type=int, default=None, help="Seed for reproducible history")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def sellers(seller_id: Optional[str], days: int, seed: Optional[int], as_json: bool):
    """
    Show the seller leaderboard ranked by UVC.

    With SELLER_ID, show that seller's history and development plan instead.
    """
    if seed is None:
        seed = current_settings().seed
    repo = SellerRepository(rng=random.Random(seed))

    if seller_id is not None:
        _show_seller(repo, seller_id, days, as_json)
        return

    summary = repo.summary()
    summary = repo.summary()

    if as_json:
        JsonRenderer("sellers").render_success({
            "summary": {
                "top_performer": summary.top_performer.id if summary.top_performer else None,
                "needs_attention": summary.needs_attention.id if summary.needs_attention else None,
                "critical": summary.critical.id if summary.critical else None,
                "average_revenue": summary.average_revenue,
                "average_uvc": summary.average_uvc,
                "average_ticket": summary.average_ticket,
            },
            "sellers": [s.model_dump(mode="json", exclude={"history"}) for s in repo.list()],
        })
        return

    table = Table(title="Sellers")
    table.add_column("Seller")
    table.add_column("UVC", justify="right")
    table.add_column("Revenue", justify="right")
    table.add_column("Avg ticket", justify="right")
    table.add_column("Status")
    table.add_column("Plan", style="cyan")
    for seller in sorted(repo.list(), key=lambda s: s.metrics.uvc, reverse=True):
        shown = format_seller_metrics(seller)
        color = STATUS_COLORS[seller.status]
        table.add_row(
            seller.name,
            shown["uvc"],
            shown["revenue"],
            shown["avg_ticket"],
            f"[{color}]{seller.status.value}[/{color}]",
            seller.action_plan_id or "",
        )
    console.print(table)

    if summary.top_performer:
        console.print(f"🏆 Top performer: [bold]{summary.top_performer.name}[/bold]")
    if summary.needs_attention:
        console.print(f"⚠️  Needs attention: [yellow]{summary.needs_attention.name}[/yellow]")
    if summary.critical:
        console.print(f"🚨 Critical: [red]{summary.critical.name}[/red]")
    console.print(
        f"[dim]Averages: UVC {format_number(summary.average_uvc, 2)}, "
        f"revenue {format_currency(summary.average_revenue)}, "
        f"ticket {format_currency(summary.average_ticket)}[/dim]"
    )


def _show_seller(repo: SellerRepository, seller_id: str, days: int, as_json: bool) -> None:
    renderer = JsonRenderer("sellers")
    seller = repo.get(seller_id)
    if seller is None:
        error = SellerNotFoundError(seller_id)
        if as_json:
            renderer.render_error(error)
        else:
            echo_error(str(error))
        sys.exit(1)

    history = repo.history(seller_id, days)
    plan = repo.action_plan(seller_id)

    if as_json:
        renderer.render_success({
            "seller": seller.model_dump(mode="json", exclude={"history"}),
            "history": history,
            "action_plan": plan.model_dump(mode="json") if plan else None,
        })
        return

    shown = format_seller_metrics(seller)
    color = STATUS_COLORS[seller.status]
    console.print(f"[bold]{seller.name}[/bold] [{color}]{seller.status.value}[/{color}]")
    console.print(f"UVC {shown['uvc']}, revenue {shown['revenue']}, ticket {shown['avg_ticket']}")

    table = Table(title=f"History: {seller.name}")
    table.add_column("Date")
    table.add_column("UVC", justify="right")
    table.add_column("Revenue", justify="right")
    table.add_column("Tickets", justify="right")
    metrics = history["metrics"]
    for i, day in enumerate(history["dates"]):
        table.add_row(
            day,
            format_number(metrics["uvc"][i], 2),
            format_currency(metrics["revenue"][i]),
            str(metrics["ticket_count"][i]),
        )
    console.print(table)

    if plan:
        console.print(f"\n[cyan]{plan.id}[/cyan]: {plan.title}")
        for step in plan.steps:
            console.print(f"  • {step}")
