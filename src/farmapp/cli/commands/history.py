"""
History Command - Synthetic daily series for an indicator.
"""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ...config import MAX_HISTORY_DAYS
from ...core.lookup import LookupService
from ...utils.formatters import format_number
from ..utils import current_settings, echo_warning

console = Console()


@click.command()
@click.argument("indicator_id")
@click.option("--days", default=None, type=click.IntRange(1, MAX_HISTORY_DAYS),
              help="Number of days to show  [default: from config]")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible series")
def history(indicator_id: str, days: Optional[int], seed: Optional[int]):
    """
    Show the last DAYS values of INDICATOR_ID.
    """
    settings = current_settings()
    days = days or settings.history_days
    seed = seed if seed is not None else settings.seed
    points = LookupService(seed=seed).history(indicator_id, days)
    if not points:
        echo_warning(f"No history for {indicator_id}")
        return

    table = Table(title=f"History: {indicator_id}")
    table.add_column("Date")
    table.add_column("Value", justify="right")
    for point in points:
        table.add_row(point.date, format_number(point.value, 2))
    console.print(table)
