"""Abstract repository interface (port) for actions."""

from abc import ABC, abstractmethod
from uuid import UUID

from sgca.domain.entities import Action, Page, PageRequest, SortOrder


class ActionRepository(ABC):
    """Port for action persistence.

    Filters passed to ``list_active`` / ``page_active`` / ``count_active``
    compose with AND; ``None`` means "no filter".
    """

    @abstractmethod
    async def get_by_id(self, action_id: UUID, *, include_deleted: bool = False) -> Action | None:
        ...

    @abstractmethod
    async def list_active(
        self,
        *,
        application_id: UUID | None = None,
        section_id: UUID | None = None,
        name: str | None = None,
        text: str | None = None,
        sort: tuple[SortOrder, ...] | None = None,
    ) -> list[Action]:
        ...

    @abstractmethod
    async def page_active(
        self,
        page_request: PageRequest,
        *,
        application_id: UUID | None = None,
        section_id: UUID | None = None,
        name: str | None = None,
    ) -> Page[Action]:
        ...

    @abstractmethod
    async def exists_by_name(
        self,
        name: str,
        application_id: UUID,
        section_id: UUID,
        *,
        exclude_id: UUID | None = None,
    ) -> bool:
        """Case-insensitive name probe among active actions of one (application, section) pair."""
        ...

    @abstractmethod
    async def count_active(
        self, *, application_id: UUID | None = None, section_id: UUID | None = None
    ) -> int:
        ...

    @abstractmethod
    async def create(self, action: Action) -> Action:
        ...

    @abstractmethod
    async def update(self, action: Action) -> Action:
        ...
