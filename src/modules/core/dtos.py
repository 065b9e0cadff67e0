"""Shared DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.  Resource
modules extend ``ResourceDTO`` with their own attribute set; every
resource embeds an ``AddressDTO``.  DTOs are immutable (``frozen=True``),
so a stored record can be handed out without copying.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AddressDTO(BaseModel):
    """Postal address embedded in every resource.

    All fields are optional at parse time: structural rules belong to
    ``AddressValidator`` so that a missing street is reported as an
    address error rather than a generic body error.
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
    )

    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = None


class ResourceDTO(BaseModel):
    """Base record shape: an identifier, a name and an address."""

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    id: str | None = None
    name: str = Field(min_length=1)
    address: AddressDTO | None = None

    @field_validator("id", mode="after")
    @classmethod
    def blank_id_is_missing(cls, v: str | None) -> str | None:
        """Treat ``""`` like an absent id so the service generates one."""
        return v or None
