"""
Input checks applied before a contact is handed to storage.

File: validation.py
Created: 2026-10-18
Last Modified: 2026-10-18
"""

import logging
from dataclasses import dataclass
from typing import Optional

import phonenumbers

from .errors import InvalidContactError
from .models import Contact

log = logging.getLogger(__name__)


def normalize_phone_number(phone: str, default_region: str = "US") -> Optional[str]:
    """
    Normalize phone number to E.164 format.

    Format: +[country code][subscriber number] (e.g., +15551234567)

    Args:
        phone: Raw phone number string (e.g., "(555) 123-4567", "+1 555 123 4567")
        default_region: Region assumed when the number has no country code

    Returns:
        E.164 formatted number or None if invalid

    Examples:
        >>> normalize_phone_number("+1 (650) 253-0000")
        '+16502530000'
        >>> normalize_phone_number("+44 20 7946 0958", "GB")
        '+442079460958'
        >>> normalize_phone_number("invalid") is None
        True
    """
    if not phone or not isinstance(phone, str):
        return None

    phone = phone.strip()
    if not phone:
        return None

    try:
        parsed = phonenumbers.parse(phone, default_region)
    except phonenumbers.NumberParseException as e:
        log.debug(f"Could not parse phone number '{phone}': {e}")
        return None

    if not phonenumbers.is_valid_number(parsed):
        log.debug(f"Phone number '{phone}' is not valid according to phonenumbers library")
        return None

    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.E164)


@dataclass(frozen=True)
class ContactPolicy:
    """
    Rules a new contact has to pass on the add path.

    Name and phone number must always be non-blank. With
    ``phone_format="e164"`` the number must also be a valid phone number and
    is stored normalized; ``"any"`` keeps it exactly as typed.
    """

    phone_format: str = "any"
    default_region: str = "US"

    def build(self, name: str, phone_number: str) -> Contact:
        """
        Validate raw form input and turn it into an unsaved Contact.

        Raises:
            InvalidContactError: if a field is blank or the number is rejected
        """
        if not name or not name.strip():
            raise InvalidContactError("Name must not be blank", field="name")
        if not phone_number or not phone_number.strip():
            raise InvalidContactError("Phone number must not be blank", field="phone_number")

        if self.phone_format == "e164":
            normalized = normalize_phone_number(phone_number, self.default_region)
            if normalized is None:
                raise InvalidContactError(
                    f"'{phone_number}' is not a valid phone number",
                    field="phone_number",
                )
            phone_number = normalized

        return Contact(name=name, phone_number=phone_number)
