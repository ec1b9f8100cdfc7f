"""
Shared data models for Contactbook.
"""

from .contact import Contact

__all__ = [
    "Contact",
]
