"""
Interactive terminal app: wires the store, view model and screens together.

File: ui/app.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging

from rich.console import Console

from ..config import AppConfig
from ..database import ContactStore
from ..validation import ContactPolicy
from ..viewmodel import ContactViewModel
from .navigation import ADD_CONTACT, CONTACT_LIST, NavController
from .screens import add_contact_screen, contact_list_screen

console = Console()
log = logging.getLogger(__name__)


async def run_app(config: AppConfig) -> None:
    """Run the screen loop until the user quits."""
    store = await ContactStore.open(config.db_path)
    policy = ContactPolicy(phone_format=config.phone_format, default_region=config.default_region)
    nav = NavController(start_destination=CONTACT_LIST)

    log.info(f"Starting contacts app with database {config.db_path}")

    async with ContactViewModel(store, policy) as viewmodel:
        while True:
            if nav.current == CONTACT_LIST:
                if not await contact_list_screen(nav, viewmodel, config):
                    break
            elif nav.current == ADD_CONTACT:
                await add_contact_screen(nav, viewmodel)

    console.print("[dim]Goodbye![/]")
