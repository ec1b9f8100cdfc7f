"""
Screen routing for the terminal UI.

File: ui/navigation.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
from typing import Iterable, List, Optional

log = logging.getLogger(__name__)

CONTACT_LIST = "contact_list"
ADD_CONTACT = "add_contact"

ROUTES = (CONTACT_LIST, ADD_CONTACT)


class NavController:
    """Back stack of route names. The start destination is never popped."""

    def __init__(self, start_destination: str = CONTACT_LIST, routes: Iterable[str] = ROUTES):
        self.routes = tuple(routes)
        if start_destination not in self.routes:
            raise ValueError(f"Unknown start destination: {start_destination}")
        self._back_stack: List[str] = [start_destination]

    @property
    def current(self) -> str:
        return self._back_stack[-1]

    @property
    def back_stack(self) -> List[str]:
        return list(self._back_stack)

    def navigate(self, route: str) -> None:
        if route not in self.routes:
            raise ValueError(f"Unknown route: {route}")
        self._back_stack.append(route)
        log.debug(f"Navigated to {route}")

    def pop_back_stack(self) -> Optional[str]:
        """
        Leave the current screen.

        Returns:
            The route now on top, or None if already at the start destination
        """
        if len(self._back_stack) == 1:
            return None
        self._back_stack.pop()
        return self.current
