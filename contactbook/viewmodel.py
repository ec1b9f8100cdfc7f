"""
State holder between the screens and the contact store.

Screens read ``contacts`` and call ``add_contact`` / ``delete_contact``;
mutations are queued onto a single background worker so input handling
never waits on the database.

File: viewmodel.py
Created: 2026-10-18
Last Modified: 2026-10-19
"""

import asyncio
import logging
from typing import AsyncIterator, Awaitable, Callable, List, Optional, Tuple

from .database import ContactStore
from .models import Contact
from .validation import ContactPolicy

log = logging.getLogger(__name__)

Mutation = Callable[[], Awaitable[object]]


class ContactViewModel:
    """Exposes the live contact list and forwards add/delete intents."""

    def __init__(self, store: ContactStore, policy: Optional[ContactPolicy] = None):
        self.store = store
        self.policy = policy or ContactPolicy()

        # Placeholder until the first snapshot arrives
        self.contacts: List[Contact] = []

        self._pending: "asyncio.Queue[Optional[Tuple[Mutation, asyncio.Future]]]" = asyncio.Queue()
        self._worker: Optional[asyncio.Task] = None
        self._collector: Optional[asyncio.Task] = None
        self._first_snapshot = asyncio.Event()
        self._closed = False

    async def __aenter__(self) -> "ContactViewModel":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def start(self) -> None:
        """Start collecting snapshots and processing queued mutations."""
        if self._closed:
            raise RuntimeError("ContactViewModel is closed")
        if self._collector is None:
            self._collector = asyncio.create_task(self._collect())
        if self._worker is None:
            self._worker = asyncio.create_task(self._drain())

    def observe(self) -> AsyncIterator[List[Contact]]:
        """The store's live snapshot feed, passed through unchanged."""
        return self.store.observe_all()

    def add_contact(self, name: str, phone_number: str) -> asyncio.Future:
        """
        Validate input and schedule an insert.

        Returns immediately; the future resolves once the insert has
        committed (or carries its StorageFailure).

        Raises:
            InvalidContactError: if the policy rejects the input, in which
                case nothing is scheduled
        """
        contact = self.policy.build(name, phone_number)
        return self._schedule(lambda: self.store.insert(contact), f"add '{contact.name}'")

    def delete_contact(self, contact: Contact) -> asyncio.Future:
        """Schedule a delete and return immediately."""
        return self._schedule(lambda: self.store.delete(contact), f"delete {contact.id}")

    async def settled(self) -> None:
        """Wait until every mutation scheduled so far has finished and a snapshot has arrived."""
        await self._pending.join()

        if self._collector is not None and not self._first_snapshot.is_set():
            waiter = asyncio.ensure_future(self._first_snapshot.wait())
            await asyncio.wait({waiter, self._collector}, return_when=asyncio.FIRST_COMPLETED)
            waiter.cancel()

        # Let the collector pick up the snapshot published by the last commit
        await asyncio.sleep(0)

    async def close(self) -> None:
        """
        End the lifecycle.

        Mutations that have not started are cancelled; one that is already
        committing is allowed to finish.
        """
        if self._closed:
            return
        self._closed = True

        cancelled = 0
        while not self._pending.empty():
            item = self._pending.get_nowait()
            self._pending.task_done()
            if item is not None:
                item[1].cancel()
                cancelled += 1
        if cancelled:
            log.info(f"Cancelled {cancelled} queued mutation(s)")

        if self._worker is not None:
            self._pending.put_nowait(None)
            await self._worker

        if self._collector is not None:
            self._collector.cancel()
            try:
                await self._collector
            except asyncio.CancelledError:
                pass

    def _schedule(self, mutation: Mutation, label: str) -> asyncio.Future:
        if self._closed:
            raise RuntimeError("ContactViewModel is closed")
        if self._worker is None:
            self.start()

        future = asyncio.get_running_loop().create_future()
        self._pending.put_nowait((mutation, future))
        log.debug(f"Scheduled {label}")
        return future

    async def _drain(self) -> None:
        """Run queued mutations one at a time until told to stop."""
        while True:
            item = await self._pending.get()
            try:
                if item is None:
                    return

                mutation, future = item
                if future.cancelled():
                    continue

                try:
                    await mutation()
                except Exception as e:
                    log.error(f"Contact mutation failed: {e}")
                    if not future.cancelled():
                        future.set_exception(e)
                else:
                    if not future.cancelled():
                        future.set_result(None)
            finally:
                self._pending.task_done()

    async def _collect(self) -> None:
        async for snapshot in self.store.observe_all():
            self.contacts = snapshot
            self._first_snapshot.set()
            log.debug(f"Snapshot received: {len(snapshot)} contact(s)")
