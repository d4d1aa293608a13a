"""Application service (use case) for Application operations."""

import logging
from uuid import UUID

from sgca.application.interfaces import ApplicationRepository
from sgca.application.schemas import ApplicationCreate, ApplicationUpdate
from sgca.domain.entities import Application, ApplicationState, Page, PageRequest, SortOrder
from sgca.domain.exceptions import (
    DomainValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidStateError,
)

logger = logging.getLogger(__name__)

_ENTITY = "Aplicación"


class ApplicationService:
    """Orchestrates application business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ApplicationRepository):
        self._repository = repository

    async def create_application(self, data: ApplicationCreate | None) -> Application:
        if data is None:
            raise DomainValidationError("Los datos de la aplicación son requeridos")
        await self._ensure_identifier_key_free(data.identifier_key)
        await self._ensure_url_free(data.url)

        application = Application(
            name=data.name,
            description=data.description,
            url=data.url,
            identifier_key=data.identifier_key,
            state=data.state or ApplicationState.ACTIVE,
        )
        created = await self._repository.create(application)
        logger.info("Aplicación creada id=%s llave=%s", created.id, created.identifier_key)
        return created

    async def get_application(self, application_id: UUID) -> Application:
        logger.debug("Obteniendo aplicación id=%s", application_id)
        application = await self._repository.get_by_id(application_id)
        if application is None:
            raise EntityNotFoundError(_ENTITY, application_id)
        return application

    async def get_by_identifier_key(self, identifier_key: str) -> Application:
        logger.debug("Obteniendo aplicación llave=%s", identifier_key)
        application = await self._repository.get_by_identifier_key(identifier_key)
        if application is None:
            raise EntityNotFoundError(_ENTITY, identifier_key, field="llave")
        return application

    async def list_active_applications(self, sort: tuple[SortOrder, ...] | None = None) -> list[Application]:
        """Applications in state ACTIVO, by name unless ``sort`` says otherwise."""
        return await self._repository.list_by_state(ApplicationState.ACTIVE, sort)

    async def page_active_applications(self, page_request: PageRequest) -> Page[Application]:
        logger.debug("Listando aplicaciones página=%d tamaño=%d", page_request.page, page_request.size)
        return await self._repository.page_by_state(ApplicationState.ACTIVE, page_request)

    async def search_by_name(self, text: str | None) -> list[Application]:
        """Case-insensitive substring search; blank input lists the active applications."""
        if text is None or not text.strip():
            return await self.list_active_applications()
        return await self._repository.search_by_name(text.strip())

    async def update_application(self, application_id: UUID, data: ApplicationUpdate | None) -> Application:
        if data is None:
            raise DomainValidationError("Los datos de la aplicación son requeridos")
        application = await self.get_application(application_id)

        if application.identifier_key != data.identifier_key:
            await self._ensure_identifier_key_free(data.identifier_key, exclude_id=application_id)
        if application.url != data.url:
            await self._ensure_url_free(data.url, exclude_id=application_id)

        application.update(
            name=data.name,
            description=data.description,
            url=data.url,
            identifier_key=data.identifier_key,
            state=data.state,
        )
        updated = await self._repository.update(application)
        logger.info("Aplicación actualizada id=%s", application_id)
        return updated

    async def delete_application(self, application_id: UUID) -> None:
        application = await self.get_application(application_id)
        application.mark_deleted()
        await self._repository.update(application)
        logger.info("Aplicación eliminada id=%s", application_id)

    async def restore_application(self, application_id: UUID) -> Application:
        application = await self._repository.get_by_id(application_id, include_deleted=True)
        if application is None:
            raise EntityNotFoundError(_ENTITY, application_id)
        if not application.is_deleted():
            raise InvalidStateError("La aplicación no está eliminada")

        await self._ensure_identifier_key_free(application.identifier_key, exclude_id=application_id)
        await self._ensure_url_free(application.url, exclude_id=application_id)

        application.mark_restored()
        restored = await self._repository.update(application)
        logger.info("Aplicación restaurada id=%s", application_id)
        return restored

    async def change_state(self, application_id: UUID, state: ApplicationState) -> Application:
        application = await self.get_application(application_id)
        application.change_state(state)
        updated = await self._repository.update(application)
        logger.info("Estado de aplicación id=%s cambiado a %s", application_id, state.value)
        return updated

    async def count_active(self) -> int:
        return await self._repository.count_by_state(ApplicationState.ACTIVE)

    async def exists_by_identifier_key(self, identifier_key: str) -> bool:
        return await self._repository.exists_by_identifier_key(identifier_key)

    async def _ensure_identifier_key_free(self, identifier_key: str, exclude_id: UUID | None = None) -> None:
        if await self._repository.exists_by_identifier_key(identifier_key, exclude_id=exclude_id):
            raise DuplicateEntityError(_ENTITY, "la llave identificadora", identifier_key)

    async def _ensure_url_free(self, url: str, exclude_id: UUID | None = None) -> None:
        if await self._repository.exists_by_url(url, exclude_id=exclude_id):
            raise DuplicateEntityError(_ENTITY, "la URL", url)
