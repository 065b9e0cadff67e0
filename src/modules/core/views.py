"""Shared API views.

``ResourceViewSet`` is the HTTP face of a ``ResourceService``: it parses
the request body into the resource DTO, delegates to the service and
turns the outcome into a status code.  Domain exceptions are translated
in one place, ``handle_exception``, through ``ERROR_STATUS``; anything
not in the table goes to DRF's default handling, so generic exceptions
are never swallowed.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils import timezone
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiResponse, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import ParseError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.dtos import ResourceDTO
from modules.core.exceptions import (
    AddressValidationError,
    InvalidPayload,
    ResourceAlreadyExists,
    ResourceNotFound,
)
from modules.core.registry import registry
from modules.core.services import ResourceService

logger = structlog.get_logger(__name__)

ERROR_STATUS: Dict[type[Exception], int] = {
    InvalidPayload: status.HTTP_400_BAD_REQUEST,
    AddressValidationError: status.HTTP_400_BAD_REQUEST,
    ParseError: status.HTTP_400_BAD_REQUEST,
    ResourceNotFound: status.HTTP_404_NOT_FOUND,
    ResourceAlreadyExists: status.HTTP_409_CONFLICT,
}


def error_status_for(exc: Exception) -> Optional[int]:
    """Status for *exc*, matching subclasses through the MRO."""
    for klass in type(exc).__mro__:
        if klass in ERROR_STATUS:
            return ERROR_STATUS[klass]
    return None


def plain_text(message: str, status_code: int) -> HttpResponse:
    return HttpResponse(
        message, status=status_code, content_type="text/plain; charset=utf-8"
    )


def describe_validation_error(exc: PydanticValidationError) -> str:
    """Flatten pydantic errors into ``field: message`` pairs."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "body"
        parts.append(f"{location}: {error['msg']}")
    return "Invalid body applied: " + "; ".join(parts)


class ResourceViewSet(ViewSet):
    """ViewSet for CRUD over one in-memory collection.

    The service is injected per route through ``as_view(service=...)``;
    subclasses only pick the DTO used to parse request bodies.
    """

    service: Optional[ResourceService] = None
    dto_class: type[ResourceDTO] = ResourceDTO

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /services/{collection}"""
        records = self.service.list()
        return Response([record.model_dump(mode="json") for record in records])

    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /services/{collection}/{pk}"""
        record = self.service.get(pk)
        return Response(record.model_dump(mode="json"))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request, pk: Optional[str] = None) -> Response:
        """POST /services/{collection}/add

        The route passes ``pk="add"`` for its GET/DELETE fallback; the id of
        a new record always comes from the body.
        """
        record = self.service.add(self.parse_payload(request))
        return Response(record.model_dump(mode="json"), status=status.HTTP_202_ACCEPTED)

    def update(self, request: Request, pk: str) -> Response:
        """PUT /services/{collection}/update/{pk}"""
        self.service.get(pk)
        record = self.service.update(pk, self.parse_payload(request))
        return Response(record.model_dump(mode="json"))

    def destroy(self, request: Request, pk: str) -> HttpResponse:
        """DELETE /services/{collection}/{pk} (customers: /delete/{pk})"""
        self.service.remove(pk)
        return plain_text(
            f"{self.service.resource_name} successfully removed",
            status.HTTP_204_NO_CONTENT,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def parse_payload(self, request: Request) -> ResourceDTO:
        try:
            return self.dto_class.model_validate(request.data)
        except PydanticValidationError as exc:
            raise InvalidPayload(describe_validation_error(exc)) from exc

    def handle_exception(self, exc: Exception) -> HttpResponse:
        status_code = error_status_for(exc)
        if status_code is None:
            return super().handle_exception(exc)
        logger.info(
            "request.rejected",
            error=type(exc).__name__,
            status_code=status_code,
            detail=str(exc),
        )
        return plain_text(str(exc), status_code)


def resource_schema(resource_name: str) -> Dict[str, Any]:
    """``extend_schema_view`` arguments documenting one resource's routes."""
    noun = resource_name.lower()
    body = OpenApiResponse(OpenApiTypes.OBJECT, description=f"{resource_name} record")
    not_found = OpenApiResponse(description=f"{resource_name} not found")
    invalid = OpenApiResponse(description="Invalid body applied")
    return {
        "create": extend_schema(
            summary=f"Adds a {noun} to the mocked list",
            request=OpenApiTypes.OBJECT,
            responses={
                202: body,
                400: invalid,
                409: OpenApiResponse(description=f"{resource_name} id already taken"),
            },
        ),
        "retrieve": extend_schema(
            summary=f"Searches a {resource_name} by id",
            responses={200: body, 404: not_found},
        ),
        "list": extend_schema(
            summary=f"Searches for all the {resource_name}s on the mocked list",
            responses={200: OpenApiResponse(OpenApiTypes.OBJECT, description=f"{resource_name}s found")},
        ),
        "update": extend_schema(
            summary=f"Updates {resource_name} data after finding it by id",
            request=OpenApiTypes.OBJECT,
            responses={200: body, 400: invalid, 404: not_found},
        ),
        "destroy": extend_schema(
            summary=f"Deletes a {resource_name} from the mocked list after finding it by id",
            responses={
                204: OpenApiResponse(OpenApiTypes.STR, description=f"{resource_name} deleted"),
                404: not_found,
            },
        ),
    }


def health_check(request: HttpRequest) -> JsonResponse:
    collections = {
        name: service.count() for name, service in registry.collections().items()
    }
    logger.info("health_check_completed", collections=collections)
    return JsonResponse(
        {
            "status": "healthy",
            "timestamp": timezone.now().isoformat(),
            "collections": collections,
        }
    )
