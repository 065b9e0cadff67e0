"""Store domain exceptions.

Raised by the Service Layer; the API layer maps them through the shared
exception-to-status table.
"""

from __future__ import annotations

from modules.core.exceptions import ResourceAlreadyExists, ResourceNotFound


class StoreAlreadyExists(ResourceAlreadyExists):
    """A store with the same id is already on the list."""


class StoreNotFound(ResourceNotFound):
    """The requested store is not on the list."""
