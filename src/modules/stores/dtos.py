"""Store DTO."""

from __future__ import annotations

from modules.core.dtos import ResourceDTO


class StoreDTO(ResourceDTO):
    phone: str | None = None
