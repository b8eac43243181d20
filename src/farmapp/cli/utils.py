"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing, logging setup and the loaders every command uses to get
at the indicator graph and the action-plan repository.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from ..config import DEFAULT_DB_PATH, Settings, load_settings
from ..core.graph import IndicatorGraph
from ..core.hierarchy import HierarchyProvider, StaticHierarchyProvider
from ..core.storage import SQLiteActionPlanRepository
from ..core.types import IndicatorStatus

logger = logging.getLogger(__name__)

STATUS_COLORS = {
    IndicatorStatus.ABOVE: "green",
    IndicatorStatus.BELOW: "red",
    IndicatorStatus.NEUTRAL: "white",
}


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """Print a warning message with a yellow alert symbol."""
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    click.echo(click.style(f"   {message}", dim=True))


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def current_settings() -> Settings:
    """
    Settings of the running invocation.

    The top-level group loads them once into ``ctx.obj``; commands invoked
    on their own read the project config directly.
    """
    ctx = click.get_current_context(silent=True)
    settings = getattr(ctx.obj, "settings", None) if ctx else None
    return settings or load_settings()


def load_graph(provider: Optional[HierarchyProvider] = None) -> IndicatorGraph:
    """
    Load the indicator tree and build the graph.

    Structural problems in the tree are logged; the graph is still returned
    so read-only commands keep working on partial data.
    """
    tree = (provider or StaticHierarchyProvider()).load()
    graph = IndicatorGraph.from_tree(tree)
    for problem in graph.validate():
        logger.warning("Indicator tree: %s", problem)
    return graph


def open_plan_repository(db_path: Optional[str] = None) -> SQLiteActionPlanRepository:
    """
    Open the action-plan database.

    Resolution order: explicit path, ``db_path`` from the project config,
    then the default under ``.farmapp/``.
    """
    if db_path is None:
        db_path = current_settings().db_path or str(DEFAULT_DB_PATH)
    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.debug("Using action-plan database %s", path)
    return SQLiteActionPlanRepository(path)
