from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from contactbook.database import ContactStore
from contactbook.errors import InvalidContactError, StorageFailure
from contactbook.models import Contact
from contactbook.validation import ContactPolicy
from contactbook.viewmodel import ContactViewModel


class _FailingStore(ContactStore):
    async def insert(self, contact: Contact) -> None:
        raise StorageFailure("disk I/O error")


@pytest.mark.asyncio
async def test_contacts_start_empty_before_first_snapshot(db_path: Path) -> None:
    store = await ContactStore.open(db_path)
    await store.insert(Contact(name="Ada", phone_number="555-0100"))

    viewmodel = ContactViewModel(store)
    assert viewmodel.contacts == []

    async with viewmodel:
        await viewmodel.settled()
        while not viewmodel.contacts:
            await asyncio.sleep(0.01)
        assert [c.name for c in viewmodel.contacts] == ["Ada"]


@pytest.mark.asyncio
async def test_add_contact_returns_before_insert_runs(db_path: Path) -> None:
    store = await ContactStore.open(db_path)

    async with ContactViewModel(store) as viewmodel:
        future = viewmodel.add_contact("Ada", "555-0100")
        assert not future.done()

        await future
        await viewmodel.settled()

        assert [c.name for c in await store.get_all()] == ["Ada"]
        assert [c.name for c in viewmodel.contacts] == ["Ada"]


@pytest.mark.asyncio
async def test_delete_contact_round_trips_through_store(db_path: Path) -> None:
    store = await ContactStore.open(db_path)

    async with ContactViewModel(store) as viewmodel:
        viewmodel.add_contact("Ada", "555-0100")
        viewmodel.add_contact("Bob", "555-0200")
        await viewmodel.settled()

        ada = (await store.get_all())[0]
        viewmodel.delete_contact(ada)
        await viewmodel.settled()

        assert [c.name for c in await store.get_all()] == ["Bob"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "name, phone",
    [
        ("", "555-0100"),
        ("   ", "555-0100"),
        ("Ada", ""),
        ("Ada", "\t "),
    ],
)
async def test_blank_input_never_reaches_storage(db_path: Path, name: str, phone: str) -> None:
    store = await ContactStore.open(db_path)

    async with ContactViewModel(store) as viewmodel:
        with pytest.raises(InvalidContactError):
            viewmodel.add_contact(name, phone)
        await viewmodel.settled()

    assert await store.get_all() == []


@pytest.mark.asyncio
async def test_storage_failure_is_set_on_future(db_path: Path) -> None:
    await ContactStore.open(db_path)
    store = _FailingStore(db_path)

    async with ContactViewModel(store) as viewmodel:
        future = viewmodel.add_contact("Ada", "555-0100")
        with pytest.raises(StorageFailure):
            await future

        # The worker keeps going after a failed mutation
        viewmodel.delete_contact(Contact(id=1, name="Ada", phone_number="555-0100"))
        await viewmodel.settled()


@pytest.mark.asyncio
async def test_close_cancels_queued_but_not_started(db_path: Path) -> None:
    store = await ContactStore.open(db_path)
    viewmodel = ContactViewModel(store)

    first = viewmodel.add_contact("Ada", "555-0100")
    await asyncio.sleep(0)
    second = viewmodel.add_contact("Bob", "555-0200")
    third = viewmodel.add_contact("Cy", "555-0300")

    await viewmodel.close()

    assert first.done() and not first.cancelled()
    assert second.cancelled()
    assert third.cancelled()
    assert [c.name for c in await store.get_all()] == ["Ada"]


@pytest.mark.asyncio
async def test_closed_viewmodel_rejects_new_work(db_path: Path) -> None:
    store = await ContactStore.open(db_path)
    viewmodel = ContactViewModel(store)
    viewmodel.start()
    await viewmodel.close()

    with pytest.raises(RuntimeError):
        viewmodel.add_contact("Ada", "555-0100")
    assert store.subscriber_count == 0


@pytest.mark.asyncio
async def test_e164_policy_normalizes_before_insert(db_path: Path) -> None:
    store = await ContactStore.open(db_path)
    policy = ContactPolicy(phone_format="e164", default_region="US")

    async with ContactViewModel(store, policy) as viewmodel:
        await viewmodel.add_contact("Ada", "(650) 253-0000")
        with pytest.raises(InvalidContactError):
            viewmodel.add_contact("Bob", "12")

    assert [c.phone_number for c in await store.get_all()] == ["+16502530000"]


@pytest.mark.asyncio
async def test_observe_passes_store_feed_through(db_path: Path) -> None:
    store = await ContactStore.open(db_path)

    async with ContactViewModel(store) as viewmodel:
        feed = viewmodel.observe()
        assert await asyncio.wait_for(feed.__anext__(), 2) == []
        await viewmodel.add_contact("Ada", "555-0100")
        snapshot = await asyncio.wait_for(feed.__anext__(), 2)
        assert [c.name for c in snapshot] == ["Ada"]
        await feed.aclose()
