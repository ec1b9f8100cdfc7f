"""
Terminal UI for Contactbook.

Two screens (contact list, add contact), a back stack between them and a
side drawer with Home / Settings / About.
"""

from .app import run_app
from .navigation import ADD_CONTACT, CONTACT_LIST, NavController
from .screens import add_contact_screen, contact_list_screen, render_contact_list

__all__ = [
    "run_app",
    "NavController",
    "CONTACT_LIST",
    "ADD_CONTACT",
    "contact_list_screen",
    "add_contact_screen",
    "render_contact_list",
]
