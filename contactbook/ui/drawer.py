"""
Side drawer with the Home / Settings / About entries.

File: ui/drawer.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .. import __version__
from ..config import AppConfig

console = Console()

DRAWER_ITEMS = {
    "1": "Home",
    "2": "Settings",
    "3": "About",
}


def render_drawer() -> Panel:
    lines = [f"[cyan]{key}[/]  [bold]{label}[/]" for key, label in DRAWER_ITEMS.items()]
    return Panel.fit("\n\n".join(lines), title="Menu", border_style="cyan")


def render_settings(config: AppConfig) -> Table:
    table = Table(title="Settings", box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")

    for key, value in config.to_dict().items():
        table.add_row(key, value)

    return table


def render_about() -> Panel:
    return Panel.fit(
        f"[bold cyan]Contacts App[/] v{__version__}\n"
        "[dim]List, add and delete contacts stored in a local SQLite file.[/]",
        title="About",
        border_style="cyan",
    )


def show_drawer_item(choice: str, config: AppConfig) -> None:
    """Print the page for a drawer entry. Home just closes the drawer."""
    if choice == "2":
        console.print(render_settings(config))
    elif choice == "3":
        console.print(render_about())
