"""Customer DTO.

One immutable shape serves as request payload and stored record; ``id``
is optional on input and always set once stored.
"""

from __future__ import annotations

from pydantic import EmailStr

from modules.core.dtos import ResourceDTO


class CustomerDTO(ResourceDTO):
    surname: str | None = None
    email: EmailStr | None = None
    phone: str | None = None
