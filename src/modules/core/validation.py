"""Structural validation of postal addresses.

Rule set:

- the address itself must be present;
- ``street``, ``city``, ``zip`` and ``country`` must be non-blank;
- ``zip`` is 2-10 letters, digits, spaces or hyphens, starting with a
  letter or digit;
- ``country`` holds letters and spaces only.

Every violation is collected so the caller sees them all at once.
"""

from __future__ import annotations

import re

from modules.core.dtos import AddressDTO
from modules.core.exceptions import AddressValidationError

REQUIRED_FIELDS = ("street", "city", "zip", "country")

ZIP_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9 \-]{1,9}$")
COUNTRY_PATTERN = re.compile(r"^[A-Za-z][A-Za-z ]*$")


class AddressValidator:
    """Pure check, no side effects."""

    def validate_address(self, address: AddressDTO | None) -> None:
        """Raise ``AddressValidationError`` unless *address* is well formed."""
        if address is None:
            raise AddressValidationError("Address is required.")

        problems = [
            f"{field} is required"
            for field in REQUIRED_FIELDS
            if not getattr(address, field)
        ]
        if address.zip and not ZIP_PATTERN.match(address.zip):
            problems.append(f"zip '{address.zip}' is malformed")
        if address.country and not COUNTRY_PATTERN.match(address.country):
            problems.append(f"country '{address.country}' is malformed")

        if problems:
            raise AddressValidationError("Invalid address: " + ", ".join(problems) + ".")
