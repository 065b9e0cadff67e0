"""In-memory implementation of ``IRepository``.

Backs each resource collection with an insertion-ordered dict guarded
by a re-entrant lock, so a threaded WSGI server can share one instance
between requests.  Nothing is persisted: the collection lives as long
as the process.
"""

from __future__ import annotations

import threading
from typing import ContextManager, Dict, Generic, List, Optional, TypeVar

import structlog

from modules.core.repositories.interfaces import IRepository

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class InMemoryRepository(IRepository[T], Generic[T]):
    """Keyed collection of immutable records."""

    def __init__(self, name: str = "records") -> None:
        self.name = name
        self._records: Dict[str, T] = {}
        self._lock = threading.RLock()

    def get_by_id(self, id: str) -> Optional[T]:
        with self._lock:
            return self._records.get(id)

    def list(self) -> List[T]:
        with self._lock:
            return list(self._records.values())

    def save(self, entity: T) -> T:
        """Insert or replace; a replaced record keeps its position."""
        entity_id = getattr(entity, "id")
        with self._lock:
            is_new = entity_id not in self._records
            self._records[entity_id] = entity
        logger.debug(
            "repository.saved", collection=self.name, record_id=entity_id, is_new=is_new
        )
        return entity

    def delete(self, id: str) -> bool:
        with self._lock:
            removed = self._records.pop(id, None) is not None
        if removed:
            logger.debug("repository.deleted", collection=self.name, record_id=id)
        return removed

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def atomic(self) -> ContextManager:
        return self._lock
