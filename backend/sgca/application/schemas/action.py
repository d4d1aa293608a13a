"""Pydantic DTOs for the Action feature."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from sgca.domain.entities import Action

from .common import WireModel, clean_description, truncate_summary


class ActionCreate(WireModel):
    """Schema for creating an action under an application and an active section."""

    name: str = Field(..., min_length=2, max_length=100, examples=["Crear Usuario"])
    description: str | None = Field(None, max_length=1000)
    application_id: UUID
    section_id: UUID

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("description", mode="before")
    @classmethod
    def _clean_description(cls, value: object) -> object:
        return clean_description(value)


class ActionUpdate(ActionCreate):
    pass


class ApplicationRef(WireModel):
    id: UUID
    name: str | None
    identifier_key: str | None


class SectionRef(WireModel):
    id: UUID
    name: str | None


class ActionResponse(WireModel):
    id: UUID
    name: str
    description: str | None
    application: ApplicationRef
    section: SectionRef
    active: bool
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None

    @classmethod
    def from_entity(cls, action: Action) -> "ActionResponse":
        return cls(
            id=action.id,
            name=action.name,
            description=action.description,
            application=ApplicationRef(
                id=action.application_id,
                name=action.application_name,
                identifier_key=action.application_key,
            ),
            section=SectionRef(id=action.section_id, name=action.section_name),
            active=not action.is_deleted(),
            created_at=action.created_at,
            updated_at=action.updated_at,
            deleted_at=action.deleted_at,
        )


class ActionSummary(WireModel):
    id: UUID
    name: str
    description: str | None
    application_name: str | None
    section_name: str | None
    active: bool

    @field_validator("description")
    @classmethod
    def _truncate(cls, value: str | None) -> str | None:
        return truncate_summary(value)

    @classmethod
    def from_entity(cls, action: Action) -> "ActionSummary":
        return cls(
            id=action.id,
            name=action.name,
            description=action.description,
            application_name=action.application_name,
            section_name=action.section_name,
            active=not action.is_deleted(),
        )


class ActionStatistics(WireModel):
    total_actions: int
    actions_by_application: int
    actions_by_section: int
