"""Employee DTO."""

from __future__ import annotations

from pydantic import EmailStr

from modules.core.dtos import ResourceDTO


class EmployeeDTO(ResourceDTO):
    surname: str | None = None
    position: str | None = None
    email: EmailStr | None = None
