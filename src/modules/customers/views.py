"""Customer API views."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema_view

from modules.core.views import ResourceViewSet, resource_schema
from modules.customers.dtos import CustomerDTO


@extend_schema_view(**resource_schema("Customer"))
class CustomerViewSet(ResourceViewSet):
    dto_class = CustomerDTO
