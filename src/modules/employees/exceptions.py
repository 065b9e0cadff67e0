"""Employee domain exceptions.

Raised by the Service Layer; the API layer maps them through the shared
exception-to-status table.
"""

from __future__ import annotations

from modules.core.exceptions import ResourceAlreadyExists, ResourceNotFound


class EmployeeAlreadyExists(ResourceAlreadyExists):
    """An employee with the same id is already on the list."""


class EmployeeNotFound(ResourceNotFound):
    """The requested employee is not on the list."""
