"""Domain exceptions shared by every resource module.

Raised by the Service Layer and the address validator.  The API layer
(``ResourceViewSet.handle_exception``) maps each family onto a single
HTTP status code; the message passes through as the response body.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for errors the API layer knows how to translate."""


class InvalidPayload(DomainError):
    """The request body does not fit the resource DTO."""


class AddressValidationError(DomainError):
    """The embedded postal address is missing or structurally invalid."""


class ResourceNotFound(DomainError):
    """No record with the requested id exists in the collection."""


class ResourceAlreadyExists(DomainError):
    """A record with the same id is already stored in the collection."""
