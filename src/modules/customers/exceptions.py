"""Customer domain exceptions.

Raised by the Service Layer; the API layer maps them through the shared
exception-to-status table (404 and 409 respectively).
"""

from __future__ import annotations

from modules.core.exceptions import ResourceAlreadyExists, ResourceNotFound


class CustomerAlreadyExists(ResourceAlreadyExists):
    """A customer with the same id is already on the list."""


class CustomerNotFound(ResourceNotFound):
    """The requested customer is not on the list."""
