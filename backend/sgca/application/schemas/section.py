"""Pydantic DTOs for the Section feature."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from sgca.domain.entities import Section

from .common import WireModel, clean_description, truncate_summary


class SectionCreate(WireModel):
    """Schema for creating a section. The name must be unique among active sections."""

    name: str = Field(..., min_length=2, max_length=100, examples=["Gestión de Usuarios"])
    description: str | None = Field(None, max_length=1000)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("description", mode="before")
    @classmethod
    def _clean_description(cls, value: object) -> object:
        return clean_description(value)


class SectionUpdate(SectionCreate):
    pass


class SectionResponse(WireModel):
    id: UUID
    name: str
    description: str | None
    active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None

    @classmethod
    def from_entity(cls, section: Section) -> "SectionResponse":
        return cls(
            id=section.id,
            name=section.name,
            description=section.description,
            active=not section.is_deleted(),
            created_at=section.created_at,
            updated_at=section.updated_at,
            deleted_at=section.deleted_at,
        )


class SectionSummary(WireModel):
    id: UUID
    name: str
    description: str | None
    active: bool

    @field_validator("description")
    @classmethod
    def _truncate(cls, value: str | None) -> str | None:
        return truncate_summary(value)

    @classmethod
    def from_entity(cls, section: Section) -> "SectionSummary":
        return cls(
            id=section.id,
            name=section.name,
            description=section.description,
            active=not section.is_deleted(),
        )


class NameAvailability(WireModel):
    """Result of a name availability probe."""

    name: str
    available: bool
    exists: bool


class SectionStatistics(WireModel):
    total_sections: int
