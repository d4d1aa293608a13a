"""Abstract repository interface (port) for sections."""

from abc import ABC, abstractmethod
from uuid import UUID

from sgca.domain.entities import Page, PageRequest, Section, SortOrder


class SectionRepository(ABC):
    """Port for section persistence. Every query is restricted to active rows unless stated."""

    @abstractmethod
    async def get_by_id(self, section_id: UUID, *, include_deleted: bool = False) -> Section | None:
        ...

    @abstractmethod
    async def list_active(
        self,
        *,
        name: str | None = None,
        text: str | None = None,
        sort: tuple[SortOrder, ...] | None = None,
    ) -> list[Section]:
        """Active sections, optionally filtered by name or by text in name/description."""
        ...

    @abstractmethod
    async def page_active(self, page_request: PageRequest, *, name: str | None = None) -> Page[Section]:
        ...

    @abstractmethod
    async def exists_by_name(self, name: str, *, exclude_id: UUID | None = None) -> bool:
        """Case-insensitive name probe among active sections."""
        ...

    @abstractmethod
    async def count_active(self) -> int:
        ...

    @abstractmethod
    async def create(self, section: Section) -> Section:
        ...

    @abstractmethod
    async def update(self, section: Section) -> Section:
        ...
