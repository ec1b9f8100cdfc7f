"""
Common database constants and utilities

File: database/common.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import sqlite3
from pathlib import Path

DATA_DIR = Path("data")
LOCAL_DB_PATH = DATA_DIR / "contacts.db"

# Raised by aiosqlite as-is from the sqlite3 driver
DRIVER_ERRORS = (sqlite3.Error,)

__all__ = [
    "DATA_DIR",
    "LOCAL_DB_PATH",
    "DRIVER_ERRORS",
]
