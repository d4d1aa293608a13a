"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from uuid import UUID

from sgca.domain.entities import Application, ApplicationState, Page, PageRequest, SortOrder


class ApplicationRepository(ABC):
    """Port for application persistence — implemented in the infrastructure layer.

    Lookups skip soft-deleted rows unless ``include_deleted`` is set.  The
    ``exists_*`` probes look at every row: identifier keys and URLs are never reused.
    """

    @abstractmethod
    async def get_by_id(self, application_id: UUID, *, include_deleted: bool = False) -> Application | None:
        ...

    @abstractmethod
    async def get_by_identifier_key(self, identifier_key: str) -> Application | None:
        ...

    @abstractmethod
    async def list_by_state(
        self, state: ApplicationState, sort: tuple[SortOrder, ...] | None = None
    ) -> list[Application]:
        """Active (not deleted) applications in the given state."""
        ...

    @abstractmethod
    async def page_by_state(self, state: ApplicationState, page_request: PageRequest) -> Page[Application]:
        ...

    @abstractmethod
    async def search_by_name(self, text: str) -> list[Application]:
        """Active applications whose name contains ``text`` (case-insensitive)."""
        ...

    @abstractmethod
    async def exists_by_identifier_key(self, identifier_key: str, *, exclude_id: UUID | None = None) -> bool:
        ...

    @abstractmethod
    async def exists_by_url(self, url: str, *, exclude_id: UUID | None = None) -> bool:
        ...

    @abstractmethod
    async def count_by_state(self, state: ApplicationState) -> int:
        ...

    @abstractmethod
    async def create(self, application: Application) -> Application:
        """Persist a new application and return the stored version."""
        ...

    @abstractmethod
    async def update(self, application: Application) -> Application:
        """Persist changes (including soft-delete markers) to an existing application."""
        ...
