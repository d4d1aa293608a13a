"""Section: a functional area that groups actions."""

from dataclasses import dataclass

from .base import BaseEntity


@dataclass(kw_only=True)
class Section(BaseEntity):
    """Core domain entity for a section. Names are unique (case-insensitive) among active sections."""

    name: str
    description: str | None = None

    def update(self, *, name: str, description: str | None = None) -> None:
        self.name = name
        self.description = description
        self.touch()
