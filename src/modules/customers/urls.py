"""Customer URL configuration.

Customers keep DELETE under ``customers/delete/{id}``.
"""

from __future__ import annotations

from modules.core.routing import resource_urlpatterns
from modules.customers.views import CustomerViewSet

urlpatterns = resource_urlpatterns(
    "customers", CustomerViewSet, basename="customer", delete_under_prefix=True
)
