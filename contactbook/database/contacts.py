"""
Contact storage with a live, re-queried snapshot feed.

Every successful insert or delete re-reads the whole contacts table and
pushes the result to each open subscription, so observers always hold the
full current set rather than a diff.

File: database/contacts.py
Created: 2026-10-18
Last Modified: 2026-10-19
"""

import asyncio
import logging
from pathlib import Path
from typing import AsyncIterator, List

import aiosqlite

from ..errors import StorageFailure
from ..models import Contact
from .common import DRIVER_ERRORS, LOCAL_DB_PATH
from .create_tables import init_local_database

log = logging.getLogger(__name__)


class ContactStore:
    """Single reader/writer of the contacts table."""

    def __init__(self, db_path: Path = LOCAL_DB_PATH):
        self.db_path = Path(db_path)
        self._subscribers: List[asyncio.Queue] = []
        # Commit and publish happen under one lock so snapshots arrive in commit order
        self._write_lock = asyncio.Lock()

    @classmethod
    async def open(cls, db_path: Path = LOCAL_DB_PATH) -> "ContactStore":
        """Create the database file and table if needed, then return a store for it."""
        await init_local_database(db_path)
        return cls(db_path)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    async def get_all(self) -> List[Contact]:
        """
        Read every contact in the order SQLite returns them.

        Returns:
            List of Contact objects (empty if the table is empty)
        """
        contacts = []
        try:
            async with aiosqlite.connect(self.db_path) as conn:
                async with conn.execute("SELECT id, name, phoneNumber FROM contacts") as cursor:
                    columns = [description[0] for description in cursor.description]
                    async for row in cursor:
                        contacts.append(Contact.from_db_dict(dict(zip(columns, row))))
        except DRIVER_ERRORS as e:
            raise StorageFailure(f"Could not read contacts: {e}") from e

        return contacts

    async def insert(self, contact: Contact) -> None:
        """
        Persist a new contact and publish the updated set.

        Args:
            contact: Contact without an id; the database assigns one

        Raises:
            StorageFailure: if the contact already has an id or the commit fails
        """
        if contact.id is not None:
            raise StorageFailure(f"Contact already has id {contact.id}, refusing to insert it again")

        async with self._write_lock:
            try:
                async with aiosqlite.connect(self.db_path) as conn:
                    cursor = await conn.execute(
                        "INSERT INTO contacts (name, phoneNumber) VALUES (:name, :phoneNumber)",
                        contact.to_db_dict(),
                    )
                    await conn.commit()
                    new_id = cursor.lastrowid
            except DRIVER_ERRORS as e:
                raise StorageFailure(f"Could not insert contact '{contact.name}': {e}") from e

            log.info(f"Inserted contact {new_id} ({contact.name})")
            await self._publish()

    async def delete(self, contact: Contact) -> bool:
        """
        Remove the contact with the given id and publish the updated set.

        Deleting an id that is no longer present is a silent no-op.

        Args:
            contact: Contact carrying the id to delete

        Returns:
            True if a record was removed
        """
        if contact.id is None:
            log.debug(f"Ignoring delete of unsaved contact '{contact.name}'")
            return False

        async with self._write_lock:
            try:
                async with aiosqlite.connect(self.db_path) as conn:
                    cursor = await conn.execute("DELETE FROM contacts WHERE id = ?", (contact.id,))
                    await conn.commit()
                    removed = cursor.rowcount
            except DRIVER_ERRORS as e:
                raise StorageFailure(f"Could not delete contact {contact.id}: {e}") from e

            if removed == 0:
                log.debug(f"Contact {contact.id} was already gone")
                return False

            log.info(f"Deleted contact {contact.id} ({contact.name})")
            await self._publish()
            return True

    async def observe_all(self) -> AsyncIterator[List[Contact]]:
        """
        Live feed of the full contact set.

        Yields the current snapshot straight away, then one snapshot per
        committed change. Never finishes on its own; close it with
        ``aclose()`` or by cancelling the task iterating it.
        """
        queue: asyncio.Queue = asyncio.Queue()

        async with self._write_lock:
            snapshot = await self.get_all()
            self._subscribers.append(queue)
        log.debug(f"Subscriber added ({len(self._subscribers)} open)")

        try:
            yield snapshot
            while True:
                yield await queue.get()
        finally:
            self._subscribers.remove(queue)
            log.debug(f"Subscriber removed ({len(self._subscribers)} open)")

    async def _publish(self) -> None:
        """
        Re-query the table and hand the result to every subscriber.

        Runs after a commit has already succeeded, so a failed re-query is
        logged and that snapshot skipped rather than reported as a failed
        write. Subscribers catch up on the next successful publish.
        """
        if not self._subscribers:
            return

        try:
            snapshot = await self.get_all()
        except StorageFailure as e:
            log.error(f"Change committed but snapshot could not be published: {e}")
            return

        for queue in list(self._subscribers):
            queue.put_nowait(list(snapshot))
