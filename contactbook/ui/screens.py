"""
Contact list and add-contact screens.

Each screen renders the current state, reads one round of input and
returns. Blocking prompts run in a worker thread so queued database work
keeps going while the user types.

File: ui/screens.py
Created: 2026-10-18
Last Modified: 2026-10-19
"""

import asyncio
from typing import List, Optional

from rich import box
from rich.console import Console, Group, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from ..config import AppConfig
from ..errors import InvalidContactError
from ..models import Contact
from ..viewmodel import ContactViewModel
from .drawer import DRAWER_ITEMS, render_drawer, show_drawer_item
from .navigation import ADD_CONTACT, NavController

console = Console()


async def ask(prompt: str, **kwargs) -> str:
    return await asyncio.to_thread(Prompt.ask, prompt, **kwargs)


async def confirm(prompt: str, default: bool = False) -> bool:
    return await asyncio.to_thread(Confirm.ask, prompt, default=default)


def render_contact_list(contacts: List[Contact]) -> RenderableType:
    """Build the list screen body: a table of contacts or the empty message."""
    header = Panel.fit("[bold cyan]Contacts App[/]", border_style="cyan")

    if not contacts:
        return Group(header, Text("No contacts yet.", style="dim", justify="center"))

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("#", style="dim", width=4)
    table.add_column("Contact")

    for i, contact in enumerate(contacts, 1):
        table.add_row(str(i), contact.to_rich_text())

    return Group(header, table)


def render_add_contact() -> Panel:
    return Panel.fit("[bold cyan]Add New Contact[/]", border_style="cyan")


def _report_failure(future: asyncio.Future) -> None:
    """Surface a failed background mutation to the user."""
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        console.print(f"[red]Could not save changes: {escape(str(error))}[/]")


def _select_contact(contacts: List[Contact], choice: str) -> Optional[Contact]:
    try:
        idx = int(choice) - 1
    except ValueError:
        return None
    if 0 <= idx < len(contacts):
        return contacts[idx]
    return None


async def contact_list_screen(
    nav: NavController,
    viewmodel: ContactViewModel,
    config: AppConfig,
) -> bool:
    """
    Show the contact list and handle one action.

    Returns:
        False when the user chose to quit, True otherwise
    """
    await viewmodel.settled()
    contacts = viewmodel.contacts

    console.print()
    console.print(render_contact_list(contacts))
    console.print()
    console.print("[dim]Commands:[/]")
    console.print("  [cyan]a[/]  Add contact")
    console.print("  [cyan]d[/]  Delete contact")
    console.print("  [cyan]m[/]  Menu")
    console.print("  [cyan]q[/]  Quit")
    console.print()

    choice = await ask("Select action", choices=["a", "d", "m", "q"], default="a")

    if choice == "q":
        return False
    elif choice == "a":
        nav.navigate(ADD_CONTACT)
    elif choice == "d":
        await _delete_flow(contacts, viewmodel)
    elif choice == "m":
        await _drawer_flow(config)

    return True


async def _delete_flow(contacts: List[Contact], viewmodel: ContactViewModel) -> None:
    if not contacts:
        console.print("[dim]Nothing to delete.[/]")
        return

    choice = await ask("Contact number to delete (or 'q' to cancel)")
    if choice.lower() == "q":
        return

    contact = _select_contact(contacts, choice)
    if contact is None:
        console.print("[red]Invalid selection[/]")
        return

    console.print(Panel.fit(
        "Are you sure you want to delete this contact?\n\n"
        f"[bold]{escape(contact.name)}[/]  {escape(contact.phone_number)}",
        title="Delete Contact",
        border_style="red",
    ))
    if not await confirm("Delete", default=False):
        console.print("[dim]Cancelled.[/]")
        return

    future = viewmodel.delete_contact(contact)
    future.add_done_callback(_report_failure)


async def _drawer_flow(config: AppConfig) -> None:
    console.print(render_drawer())
    choice = await ask("Open", choices=list(DRAWER_ITEMS.keys()), default="1")
    show_drawer_item(choice, config)


async def add_contact_screen(nav: NavController, viewmodel: ContactViewModel) -> None:
    """
    Read the form fields and save the contact.

    On invalid input the user stays on this screen; otherwise the insert is
    scheduled and the screen pops back to the list without waiting for it.
    """
    console.print()
    console.print(render_add_contact())

    name = await ask("Name", default="")
    phone_number = await ask("Phone Number", default="")

    action = await ask("Save Contact? ([cyan]s[/]ave / [cyan]c[/]ancel)", choices=["s", "c"], default="s")
    if action == "c":
        nav.pop_back_stack()
        return

    try:
        future = viewmodel.add_contact(name, phone_number)
    except InvalidContactError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        return

    future.add_done_callback(_report_failure)
    nav.pop_back_stack()
