"""UserType: a role defined within one application."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from .base import BaseEntity


class UserTypeState(str, Enum):
    """Operational state of a user type."""

    ACTIVE = "ACTIVO"
    INACTIVE = "INACTIVO"


@dataclass(kw_only=True)
class UserType(BaseEntity):
    """Core domain entity for a user type, unique by name within its application."""

    name: str
    application_id: UUID
    description: str | None = None
    state: UserTypeState = UserTypeState.ACTIVE
    application_name: str | None = None

    def update(
        self,
        *,
        name: str,
        application_id: UUID,
        description: str | None = None,
        state: UserTypeState | None = None,
    ) -> None:
        self.name = name
        self.description = description
        self.application_id = application_id
        if state is not None:
            self.state = state
        self.touch()

    def change_state(self, state: UserTypeState) -> None:
        self.state = state
        self.touch()
