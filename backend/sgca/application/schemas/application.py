"""Pydantic DTOs (Data Transfer Objects) for the Application feature."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from sgca.domain.entities import ApplicationState

from .common import WireModel, clean_description


class ApplicationCreate(WireModel):
    """Schema for registering a new application."""

    name: str = Field(..., min_length=2, max_length=100, examples=["Sistema de Inventario"])
    description: str | None = Field(None, max_length=1000)
    url: str = Field(..., max_length=255, pattern=r"^https?://.*", examples=["https://inventario.example.com"])
    identifier_key: str = Field(
        ..., min_length=5, max_length=100, pattern=r"^[A-Z0-9_]+$", examples=["SYS_INVENTARIO"]
    )
    state: ApplicationState | None = Field(None, examples=["ACTIVO"])

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("description", mode="before")
    @classmethod
    def _clean_description(cls, value: object) -> object:
        return clean_description(value)


class ApplicationUpdate(ApplicationCreate):
    """Schema for replacing an application's fields; ``estado`` stays unchanged when omitted."""


class ApplicationResponse(WireModel):
    """Full application returned to the client."""

    id: UUID
    name: str
    description: str | None
    url: str
    identifier_key: str
    state: ApplicationState
    created_at: datetime
    updated_at: datetime


class ApplicationSummary(WireModel):
    id: UUID
    name: str
    url: str
    identifier_key: str
    state: ApplicationState


class ApplicationStatistics(WireModel):
    total_active: int
