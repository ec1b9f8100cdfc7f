"""
Exception types shared across Contactbook.

File: errors.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from typing import Optional


class ContactbookError(Exception):
    """Base exception for this project."""


class StorageFailure(ContactbookError):
    """Raised when a commit or query against the local database fails."""


class InvalidContactError(ContactbookError, ValueError):
    """Raised when contact input is rejected before it reaches storage."""

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ConfigError(ContactbookError):
    """Raised when configuration is invalid or incomplete."""

    def __init__(self, message: str, *, key: Optional[str] = None):
        super().__init__(f"{key}: {message}" if key else message)
        self.key = key
