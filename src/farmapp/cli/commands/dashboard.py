"""
Dashboard Command - KPI cards and chart series.
"""

import random
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from ...core.metrics import TimeRange, dashboard_metrics, graph_data
from ..renderers import JsonRenderer
from ..utils import current_settings

console = Console()

TREND_ARROWS = {"up": "[green]▲[/green]", "down": "[red]▼[/red]", "neutral": "[dim]■[/dim]"}


@click.command()
@click.option("-r", "--range", "time_range", type=click.Choice([t.value for t in TimeRange]),
              default=TimeRange.DAY.value, show_default=True, help="Time range")
@click.option("-m", "--metric", default=None, help="Also show the chart series for a metric")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible chart")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def dashboard(time_range: str, metric: Optional[str], seed: Optional[int], as_json: bool):
    """
    Show the dashboard KPI cards for a time range.
    """
    if seed is None:
        seed = current_settings().seed
    cards = dashboard_metrics(time_range)
    chart = graph_data(metric, time_range, rng=random.Random(seed)) if metric else None

    if as_json:
        JsonRenderer("dashboard").render_success({
            "time_range": time_range,
            "metrics": {name: card.model_dump(mode="json") for name, card in cards.items()},
            "chart": chart.model_dump(mode="json") if chart else None,
        })
        return

    table = Table(title=f"Dashboard ({time_range})")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_column("Trend")
    for name, card in cards.items():
        table.add_row(name, card.value, f"{TREND_ARROWS[card.trend.value]} {card.trend_value}")
    console.print(table)

    if chart:
        series = Table(title=metric)
        for label in chart.labels:
            series.add_column(label, justify="right")
        series.add_row(*(f"{v:g}" for v in chart.data))
        console.print(series)
