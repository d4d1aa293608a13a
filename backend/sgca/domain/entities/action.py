"""Action: an operation offered by an application inside a section."""

from dataclasses import dataclass
from uuid import UUID

from .base import BaseEntity


@dataclass(kw_only=True)
class Action(BaseEntity):
    """Core domain entity for an action.

    Only the child → parent references are kept.  ``application_name``,
    ``application_key`` and ``section_name`` are read-only labels filled in by
    the repository when the row is loaded; they are never persisted from here.
    """

    name: str
    application_id: UUID
    section_id: UUID
    description: str | None = None
    application_name: str | None = None
    application_key: str | None = None
    section_name: str | None = None

    def update(
        self,
        *,
        name: str,
        application_id: UUID,
        section_id: UUID,
        description: str | None = None,
    ) -> None:
        self.name = name
        self.description = description
        self.application_id = application_id
        self.section_id = section_id
        self.touch()

    def same_identity(self, name: str, application_id: UUID, section_id: UUID) -> bool:
        """True when (name, application, section) match ignoring name case."""
        return (
            self.name.lower() == name.lower()
            and self.application_id == application_id
            and self.section_id == section_id
        )
