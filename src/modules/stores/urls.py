"""Store URL configuration."""

from __future__ import annotations

from modules.core.routing import resource_urlpatterns
from modules.stores.views import StoreViewSet

urlpatterns = resource_urlpatterns("stores", StoreViewSet, basename="store")
