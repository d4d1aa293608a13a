"""Application: a registered system whose access is administered here."""

from dataclasses import dataclass
from enum import Enum

from .base import BaseEntity


class ApplicationState(str, Enum):
    """Operational state of an application."""

    ACTIVE = "ACTIVO"
    INACTIVE = "INACTIVO"


@dataclass(kw_only=True)
class Application(BaseEntity):
    """Core domain entity for an administered application.

    ``identifier_key`` is the human-readable, machine-stable external identifier;
    both it and ``url`` are unique across every application ever registered.
    """

    name: str
    url: str
    identifier_key: str
    description: str | None = None
    state: ApplicationState = ApplicationState.ACTIVE

    def update(
        self,
        *,
        name: str,
        url: str,
        identifier_key: str,
        description: str | None = None,
        state: ApplicationState | None = None,
    ) -> None:
        """Replace the mutable fields and refresh the updated_at timestamp."""
        self.name = name
        self.url = url
        self.identifier_key = identifier_key
        self.description = description
        if state is not None:
            self.state = state
        self.touch()

    def change_state(self, state: ApplicationState) -> None:
        self.state = state
        self.touch()
