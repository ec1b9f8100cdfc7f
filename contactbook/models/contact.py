"""
Contact record model.

File: models/contact.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from rich.text import Text


class Contact(BaseModel):
    """A single entry in the contact book."""
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra='ignore'
    )

    id: Optional[int] = Field(None, description="Assigned by the database on insert, never reused", gt=0)
    name: str = Field(..., description="Display name")
    phone_number: str = Field(..., alias="phoneNumber", description="Phone number as entered (or E.164 when normalized)")

    def to_db_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for database insertion"""
        return {
            "name": self.name,
            "phoneNumber": self.phone_number,
        }

    @classmethod
    def from_db_dict(cls, data: Dict[str, Any]) -> "Contact":
        """Create Contact instance from a contacts row"""
        return cls(id=data["id"], name=data["name"], phone_number=data["phoneNumber"])

    def to_rich_text(self) -> Text:
        """Format contact as Rich Text for display"""
        text = Text()
        text.append(self.name, style="bold white")
        text.append("\n  ")
        text.append(self.phone_number, style="dim")
        return text
