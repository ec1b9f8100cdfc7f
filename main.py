"""
Main entry point for Contactbook.

Runs the interactive contacts app, or a single command when one is given:

    python main.py               # interactive
    python main.py list
    python main.py add "Ada" 555-0100
    python main.py delete 1

File: main.py
Created: 2026-10-18
Last Modified: 2026-10-19
"""

import asyncio
import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

from contactbook.config import AppConfig, configure_logging
from contactbook.errors import ConfigError, ContactbookError, InvalidContactError
from contactbook.models import Contact

console = Console()

COMMANDS = {
    "list": {
        "usage": "list",
        "description": "Print every stored contact",
    },
    "add": {
        "usage": "add NAME PHONE",
        "description": "Add a contact",
    },
    "delete": {
        "usage": "delete ID",
        "description": "Delete the contact with this id",
    },
}


def show_usage():
    """Display the command table."""
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Contacts App[/] - local contact book",
            border_style="cyan",
        )
    )
    console.print()

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("Command", style="cyan")
    table.add_column("Description", style="dim")

    table.add_row("(none)", "Start the interactive app")
    for cmd in COMMANDS.values():
        table.add_row(cmd["usage"], cmd["description"])

    console.print(table)
    console.print()


async def _run_list(config: AppConfig):
    """Print every stored contact."""
    from contactbook.database import ContactStore

    store = await ContactStore.open(config.db_path)
    contacts = await store.get_all()

    if not contacts:
        console.print("[dim]No contacts yet.[/]")
        return

    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", style="white")
    table.add_column("Phone Number", style="cyan")

    for contact in contacts:
        table.add_row(str(contact.id), escape(contact.name), escape(contact.phone_number))

    console.print(table)


async def _run_add(config: AppConfig, name: str, phone_number: str):
    """Add a single contact and wait for it to be stored."""
    from contactbook.database import ContactStore
    from contactbook.validation import ContactPolicy
    from contactbook.viewmodel import ContactViewModel

    store = await ContactStore.open(config.db_path)
    policy = ContactPolicy(phone_format=config.phone_format, default_region=config.default_region)

    async with ContactViewModel(store, policy) as viewmodel:
        await viewmodel.add_contact(name, phone_number)

    console.print(f"[green]Added {escape(name)}[/]")


async def _run_delete(config: AppConfig, contact_id: int):
    """Delete a contact by id. Unknown ids are reported, not treated as errors."""
    from contactbook.database import ContactStore

    store = await ContactStore.open(config.db_path)
    removed = await store.delete(Contact(id=contact_id, name="", phone_number=""))

    if removed:
        console.print(f"[green]Deleted contact {contact_id}[/]")
    else:
        console.print(f"[yellow]No contact with id {contact_id}[/]")


async def run_command(config: AppConfig, args: list) -> bool:
    """
    Run one non-interactive command.

    Returns:
        True if the arguments were understood
    """
    command = args[0].lower()

    if command == "list" and len(args) == 1:
        await _run_list(config)
    elif command == "add" and len(args) == 3:
        await _run_add(config, args[1], args[2])
    elif command == "delete" and len(args) == 2:
        try:
            contact_id = int(args[1])
        except ValueError:
            console.print(f"[red]Not a contact id: {escape(args[1])}[/]")
            return False
        if contact_id < 1:
            console.print(f"[red]Contact ids start at 1: {contact_id}[/]")
            return False
        await _run_delete(config, contact_id)
    else:
        return False

    return True


async def main():
    """Main entry point."""
    try:
        config = AppConfig.from_env()
    except ConfigError as e:
        console.print(f"[red]Invalid configuration: {escape(str(e))}[/]")
        sys.exit(2)

    configure_logging(config)

    if len(sys.argv) > 1:
        try:
            ok = await run_command(config, sys.argv[1:])
        except InvalidContactError as e:
            console.print(f"[red]{escape(str(e))}[/]")
            sys.exit(1)
        except ContactbookError as e:
            console.print(f"[red]Storage error: {escape(str(e))}[/]")
            sys.exit(1)

        if not ok:
            console.print(f"[red]Unknown command: {escape(' '.join(sys.argv[1:]))}[/]")
            show_usage()
            sys.exit(2)
        return

    from contactbook.ui import run_app

    await run_app(config)


def run():
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
