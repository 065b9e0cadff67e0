"""Generic resource service layer (Use Cases).

``ResourceService`` owns one in-memory collection and exposes the
add/get/list/update/remove use-cases shared by customers, employees and
stores.  Resource modules bind it to their DTO and exceptions by
subclassing and setting the class attributes.

Rules enforced here:
- no record is stored with an invalid address (add and update);
- ids are unique within the collection;
- failed operations leave the collection untouched.
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, ClassVar, Generic, List, Optional, TypeVar

import structlog

from modules.core.dtos import ResourceDTO
from modules.core.exceptions import (
    AddressValidationError,
    ResourceAlreadyExists,
    ResourceNotFound,
)
from modules.core.validation import AddressValidator

if TYPE_CHECKING:
    from modules.core.repositories.interfaces import IRepository

logger = structlog.get_logger(__name__)

T = TypeVar("T", bound=ResourceDTO)


class ResourceService(Generic[T]):
    """Application service for one resource collection.

    Receives an ``IRepository`` via constructor injection (DIP).
    """

    resource_name: ClassVar[str] = "Resource"
    dto_class: ClassVar[type[ResourceDTO]] = ResourceDTO
    not_found_error: ClassVar[type[ResourceNotFound]] = ResourceNotFound
    already_exists_error: ClassVar[type[ResourceAlreadyExists]] = ResourceAlreadyExists

    def __init__(
        self,
        repository: IRepository[T],
        address_validator: Optional[AddressValidator] = None,
    ) -> None:
        self._repo = repository
        self._validator = address_validator or AddressValidator()

    @property
    def event_prefix(self) -> str:
        return self.resource_name.lower()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add(self, resource: T) -> T:
        """Store a new record, generating a UUID4 id when none is given.

        Raises:
            AddressValidationError: if the address is missing or malformed.
            ResourceAlreadyExists: if the id is already taken.
        """
        self._validate(resource)
        if resource.id is None:
            resource = resource.model_copy(update={"id": str(uuid.uuid4())})

        log = logger.bind(resource=self.event_prefix, resource_id=resource.id)
        with self._repo.atomic():
            if self._repo.get_by_id(resource.id) is not None:
                log.warning(f"{self.event_prefix}.duplicate_id")
                raise self.already_exists_error(
                    f"{self.resource_name} {resource.id} already exists."
                )
            stored = self._repo.save(resource)
        log.info(f"{self.event_prefix}.created")
        return stored

    def update(self, id: str, resource: T) -> T:
        """Replace every field of an existing record, keeping its id.

        Raises:
            ResourceNotFound: if the record does not exist.
            AddressValidationError: if the new address is missing or malformed.
        """
        log = logger.bind(resource=self.event_prefix, resource_id=id)
        with self._repo.atomic():
            self._require(id)
            self._validate(resource)
            stored = self._repo.save(resource.model_copy(update={"id": id}))
        log.info(f"{self.event_prefix}.updated")
        return stored

    def remove(self, id: str) -> None:
        """Delete a record.

        Raises:
            ResourceNotFound: if the record does not exist.
        """
        with self._repo.atomic():
            self._require(id)
            self._repo.delete(id)
        logger.info(f"{self.event_prefix}.removed", resource_id=id)

    def clear(self) -> None:
        self._repo.clear()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, id: str) -> T:
        """Retrieve a single record by id.

        Raises:
            ResourceNotFound: if the record does not exist.
        """
        record = self._require(id)
        logger.info(f"{self.event_prefix}.retrieved", resource_id=id)
        return record

    def list(self) -> List[T]:
        """Return every record in insertion order (possibly empty)."""
        return self._repo.list()

    def count(self) -> int:
        return self._repo.count()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require(self, id: str) -> T:
        record = self._repo.get_by_id(id)
        if record is None:
            logger.info(f"{self.event_prefix}.not_found", resource_id=id)
            raise self.not_found_error(f"{self.resource_name} {id} not found.")
        return record

    def _validate(self, resource: T) -> None:
        try:
            self._validator.validate_address(resource.address)
        except AddressValidationError:
            logger.warning(
                f"{self.event_prefix}.invalid_address", resource_id=resource.id
            )
            raise
