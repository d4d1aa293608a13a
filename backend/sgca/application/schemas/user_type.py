"""Pydantic DTOs for the UserType feature."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from sgca.domain.entities import UserTypeState

from .common import WireModel, clean_description


class UserTypeCreate(WireModel):
    """Schema for creating a user type; new user types always start ACTIVO."""

    name: str = Field(..., min_length=2, max_length=100, examples=["Administrador"])
    description: str | None = Field(None, max_length=500)
    application_id: UUID

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("description", mode="before")
    @classmethod
    def _clean_description(cls, value: object) -> object:
        return clean_description(value)


class UserTypeUpdate(UserTypeCreate):
    """Schema for updating a user type. An unknown ``estado`` is rejected."""

    state: UserTypeState | None = None


class UserTypeResponse(WireModel):
    id: UUID
    name: str
    description: str | None
    application_id: UUID
    application_name: str | None
    state: UserTypeState
    created_at: datetime
    updated_at: datetime


class UserTypeStatistics(WireModel):
    total_user_types: int
    user_types_by_application: int
    user_types_by_state: int
