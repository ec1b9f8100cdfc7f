"""Shared fixtures for the Contactbook test suite."""

import asyncio
from pathlib import Path

import pytest


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "contacts.db"


async def next_snapshot(feed, timeout: float = 2.0):
    """Pull one snapshot from a live feed, failing the test instead of hanging."""
    return await asyncio.wait_for(feed.__anext__(), timeout)
