"""
Wire contract for the user endpoints.

Request models ignore unknown keys, so an `id` sent by a client never reaches
the entity; identifiers are always assigned by the storage layer.
"""
from __future__ import annotations

from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints, field_validator

MAX_FIELD_LENGTH = 255

UserName = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=MAX_FIELD_LENGTH),
]


class _UserWriteRequest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: UserName = Field(..., description="Display name", examples=["Alice"])
    email: EmailStr = Field(..., description="Contact email", examples=["a@x.com"])

    @field_validator("email")
    @classmethod
    def email_fits_column(cls, v: str) -> str:
        if len(v) > MAX_FIELD_LENGTH:
            raise ValueError(f"must be at most {MAX_FIELD_LENGTH} characters")
        return v


class UserCreateRequest(_UserWriteRequest):
    """Body of POST /api/users."""


class UserUpdateRequest(_UserWriteRequest):
    """Body of PUT /api/users/{id}; replaces both name and email."""


class UserResponse(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: UUID
    name: str
    email: str
