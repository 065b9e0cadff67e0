"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the abstract collection every resource
service talks to.  Service-layer code depends on this abstraction,
never on the concrete storage.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ContextManager, Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the record managed by the
    repository (e.g. ``CustomerDTO``, ``StoreDTO``).  Records are keyed
    by their ``id`` attribute.
    """

    @abstractmethod
    def get_by_id(self, id: str) -> Optional[T]:
        """Retrieve a record by id, ``None`` when absent."""

    @abstractmethod
    def list(self) -> List[T]:
        """List every record in insertion order."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Insert or replace a record keyed by its id."""

    @abstractmethod
    def delete(self, id: str) -> bool:
        """Remove a record by id; ``False`` when nothing was removed."""

    @abstractmethod
    def count(self) -> int:
        """Number of stored records."""

    @abstractmethod
    def clear(self) -> None:
        """Drop every record."""

    @abstractmethod
    def atomic(self) -> ContextManager:
        """Context in which a read-then-write sequence is not interleaved."""
