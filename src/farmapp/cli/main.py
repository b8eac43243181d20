"""
farmapp CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

from dataclasses import dataclass

import click

from ..config import Settings, load_settings
from ..core.telemetry import AnalyticsService
from .commands import causes, dashboard, diagnose, graph, history, init
from .commands import plans, recommend, sellers, tree
from .utils import configure_logging
from .utils_analytics import AnalyticsGroup, build_analytics


@dataclass
class CliState:
    settings: Settings
    analytics: AnalyticsService


@click.group(cls=AnalyticsGroup)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="farmapp")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """farmapp: Pharmacy Indicator Diagnostics.

    Explains why a store's revenue or coupon count is off target by
    walking the causal graph of its indicators.

    \b
    Quick Start:
      farmapp tree
      farmapp graph uvc
      farmapp diagnose --flow cupom
    """
    configure_logging(verbose)
    settings = load_settings()
    ctx.obj = CliState(settings=settings, analytics=build_analytics(settings))


# Register commands
main.add_command(tree.tree)
main.add_command(graph.graph)
main.add_command(recommend.recommend)
main.add_command(history.history)
main.add_command(causes.causes)
main.add_command(plans.plans)
main.add_command(sellers.sellers)
main.add_command(dashboard.dashboard)
main.add_command(diagnose.diagnose)
main.add_command(init)

if __name__ == "__main__":
    main()
