"""Abstract repository interface (port) for user types."""

from abc import ABC, abstractmethod
from uuid import UUID

from sgca.domain.entities import Page, PageRequest, UserType, UserTypeState


class UserTypeRepository(ABC):
    """Port for user type persistence. Queries only see active rows unless stated."""

    @abstractmethod
    async def get_by_id(self, user_type_id: UUID, *, include_deleted: bool = False) -> UserType | None:
        ...

    @abstractmethod
    async def page_active(
        self,
        page_request: PageRequest,
        *,
        name: str | None = None,
        application_id: UUID | None = None,
        state: UserTypeState | None = None,
    ) -> Page[UserType]:
        ...

    @abstractmethod
    async def exists_by_name(
        self, name: str, application_id: UUID, *, exclude_id: UUID | None = None
    ) -> bool:
        """Case-insensitive name probe among active user types of one application."""
        ...

    @abstractmethod
    async def count_active(
        self, *, application_id: UUID | None = None, state: UserTypeState | None = None
    ) -> int:
        ...

    @abstractmethod
    async def create(self, user_type: UserType) -> UserType:
        ...

    @abstractmethod
    async def update(self, user_type: UserType) -> UserType:
        ...
