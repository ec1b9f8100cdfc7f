"""
File: database/__init__.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from .common import DATA_DIR, LOCAL_DB_PATH
from .create_tables import init_local_database
from .contacts import ContactStore

__all__ = [
    "DATA_DIR",
    "LOCAL_DB_PATH",
    "init_local_database",
    "ContactStore",
]
