"""Employee URL configuration."""

from __future__ import annotations

from modules.core.routing import resource_urlpatterns
from modules.employees.views import EmployeeViewSet

urlpatterns = resource_urlpatterns("employees", EmployeeViewSet, basename="employee")
