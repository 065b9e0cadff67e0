"""Base application config for resource modules.

Each resource app builds its service at startup, registers it under its
collection name and, when ``SEED_MOCK_DATA`` is on, fills it with the
module's mocked records.
"""

from __future__ import annotations

from typing import Any, Dict, Sequence

import structlog
from django.apps import AppConfig
from django.conf import settings

from modules.core.registry import registry
from modules.core.services import ResourceService

logger = structlog.get_logger(__name__)


class ResourceAppConfig(AppConfig):
    # Not picked up for modules.core itself; resource apps are listed by
    # dotted path in INSTALLED_APPS.
    default = False
    collection: str = ""

    def build_service(self) -> ResourceService:
        raise NotImplementedError

    def mock_records(self) -> Sequence[Dict[str, Any]]:
        return ()

    def ready(self) -> None:
        service = registry.register(self.collection, self.build_service())
        if settings.SEED_MOCK_DATA:
            seed(service, self.mock_records())


def seed(service: ResourceService, records: Sequence[Dict[str, Any]]) -> int:
    """Add *records* through the service so they pass address validation."""
    for record in records:
        service.add(service.dto_class.model_validate(record))
    logger.info("mock_data.seeded", resource=service.event_prefix, count=len(records))
    return len(records)
