"""Process-wide handle on the resource services.

Each resource app registers its service once, from ``AppConfig.ready``;
URLconfs then fetch it by collection name and hand it to the view sets.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict

if TYPE_CHECKING:
    from modules.core.services import ResourceService


class ServiceRegistry:
    def __init__(self) -> None:
        self._services: Dict[str, ResourceService] = {}

    def register(self, collection: str, service: ResourceService) -> ResourceService:
        self._services[collection] = service
        return service

    def get(self, collection: str) -> ResourceService:
        """Raises ``KeyError`` when the collection's app is not installed."""
        return self._services[collection]

    def collections(self) -> Dict[str, ResourceService]:
        return dict(self._services)

    def clear(self) -> None:
        """Empty every collection, keeping the services registered."""
        for service in self._services.values():
            service.clear()


registry = ServiceRegistry()
