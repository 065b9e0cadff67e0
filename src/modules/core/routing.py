"""URL patterns for one resource collection.

The paths are not REST-router shaped (``/add``, ``/update/{id}``) and
differ per resource in where DELETE lives, so they are spelled out here
instead of going through a DRF router.
"""

from __future__ import annotations

from typing import Dict, List

from django.urls import URLPattern, path

from modules.core.registry import registry
from modules.core.views import ResourceViewSet


def resource_urlpatterns(
    collection: str,
    viewset: type[ResourceViewSet],
    *,
    basename: str,
    delete_under_prefix: bool = False,
) -> List[URLPattern]:
    """Build the five CRUD routes for *collection*.

    With ``delete_under_prefix`` DELETE is served at
    ``{collection}/delete/{pk}``; otherwise it shares ``{collection}/{pk}``
    with GET.
    """
    service = registry.get(collection)

    def view(actions: Dict[str, str]):
        return viewset.as_view(actions, service=service)

    detail_actions = {"get": "retrieve"}
    if not delete_under_prefix:
        detail_actions["delete"] = "destroy"
    urlpatterns = [
        path(collection, view({"get": "list"}), name=f"{basename}-list"),
        # "add" is also a valid record id: GET and DELETE fall through to it.
        path(
            f"{collection}/add",
            view({"post": "create", **detail_actions}),
            {"pk": "add"},
            name=f"{basename}-add",
        ),
        path(
            f"{collection}/update/<str:pk>",
            view({"put": "update"}),
            name=f"{basename}-update",
        ),
    ]
    if delete_under_prefix:
        urlpatterns.append(
            path(
                f"{collection}/delete/<str:pk>",
                view({"delete": "destroy"}),
                name=f"{basename}-delete",
            )
        )
    urlpatterns.append(
        path(f"{collection}/<str:pk>", view(detail_actions), name=f"{basename}-detail")
    )
    return urlpatterns
