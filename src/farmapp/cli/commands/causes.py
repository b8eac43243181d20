"""
Causes Command - Candidate root causes for an indicator.
"""

import click

from ...core.lookup import causes_for
from ..utils import echo_warning, load_graph


@click.command()
@click.argument("indicator_id")
def causes(indicator_id: str):
    """
    List likely root causes for INDICATOR_ID, plus the indicators that
    feed into it.
    """
    reasons = causes_for(indicator_id)
    if not reasons:
        echo_warning(f"No known causes for {indicator_id}")
        return

    click.echo(click.style(f"Possible causes for {indicator_id}:", bold=True))
    for reason in reasons:
        click.echo(f"  • {reason}")

    sources = load_graph().causal_sources_of(indicator_id)
    if sources:
        click.echo()
        click.echo(click.style("Influenced by:", bold=True))
        for source in sources:
            click.echo(f"  ← {source.name} ({source.id}, {source.status.value})")
