"""
File: database/create_tables.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
from pathlib import Path

import aiosqlite

from ..errors import StorageFailure
from .common import DRIVER_ERRORS, LOCAL_DB_PATH

log = logging.getLogger(__name__)


async def init_local_database(db_path: Path = LOCAL_DB_PATH) -> None:
    """Initialize the local SQLite database with required tables."""
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        async with aiosqlite.connect(db_path) as conn:
            # AUTOINCREMENT keeps ids of deleted contacts from being handed out again
            await conn.execute("""
                CREATE TABLE IF NOT EXISTS contacts (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    phoneNumber TEXT NOT NULL
                )
            """)
            await conn.commit()
    except DRIVER_ERRORS as e:
        raise StorageFailure(f"Could not initialize database at {db_path}: {e}") from e

    log.info(f"Local database initialized at {db_path}")
