"""Employee API views."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema_view

from modules.core.views import ResourceViewSet, resource_schema
from modules.employees.dtos import EmployeeDTO


@extend_schema_view(**resource_schema("Employee"))
class EmployeeViewSet(ResourceViewSet):
    dto_class = EmployeeDTO
