"""
Init Command - Project bootstrap.

This module handles the `farmapp init` command, which writes
``.farmapp/config.yaml`` with the default settings and seeds the
action-plan database.
"""

from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt

from ...config import CONFIG_DIR, DEFAULT_DB_PATH, default_config_dict
from ...core.storage import SQLiteActionPlanRepository

console = Console()


def create_gitignore(farmapp_dir: Path):
    """Ensure the .farmapp/ directory is ignored by git."""
    gitignore = farmapp_dir.parent / ".gitignore"
    entry = f"\n# farmapp\n{CONFIG_DIR}/\n"

    if not gitignore.exists():
        gitignore.write_text(entry)
    elif CONFIG_DIR not in gitignore.read_text():
        with open(gitignore, "a") as f:
            f.write(entry)


def _init_project(root_dir: Path, allow_analytics: bool, provider: str):
    farmapp_dir = root_dir / CONFIG_DIR
    config_file = farmapp_dir / "config.yaml"
    db_file = root_dir / DEFAULT_DB_PATH

    config = default_config_dict(root_dir.name)
    config["db_path"] = str(DEFAULT_DB_PATH)
    config["analytics"]["enabled"] = allow_analytics
    config["analytics"]["provider"] = provider

    farmapp_dir.mkdir(exist_ok=True)
    with open(config_file, "w") as f:
        yaml.dump(config, f, sort_keys=False, default_flow_style=False)

    repo = SQLiteActionPlanRepository(db_file)
    create_gitignore(farmapp_dir)

    console.print("\n✨ [bold green]Initialized successfully![/bold green]")
    console.print(f"   Config created at: [dim]{config_file}[/dim]")
    console.print(f"   Action plans: [dim]{db_file}[/dim] ({repo.count()} plans)")


@click.command()
@click.option("--force", is_flag=True, help="Overwrite existing configuration")
def init(force: bool):
    """
    Initialize farmapp in the current directory.
    """
    console.print(Panel.fit("💊 [bold blue]farmapp Initialization[/bold blue]", border_style="blue"))

    root_dir = Path.cwd()
    config_file = root_dir / CONFIG_DIR / "config.yaml"

    if config_file.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {config_file}[/yellow]")
        if not Confirm.ask("Do you want to overwrite it?"):
            console.print("Aborted.")
            return

    console.print("\n[bold]Analytics[/bold]")
    allow_analytics = Confirm.ask("Send anonymous usage events?", default=False)
    provider = "amplitude"
    if allow_analytics:
        provider = Prompt.ask("Provider", choices=["amplitude", "mixpanel"], default="amplitude")

    _init_project(root_dir, allow_analytics, provider)
