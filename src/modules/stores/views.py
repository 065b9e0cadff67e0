"""Store API views."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema_view

from modules.core.views import ResourceViewSet, resource_schema
from modules.stores.dtos import StoreDTO


@extend_schema_view(**resource_schema("Store"))
class StoreViewSet(ResourceViewSet):
    dto_class = StoreDTO
