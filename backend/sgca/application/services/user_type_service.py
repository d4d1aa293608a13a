"""Application service (use case) for UserType operations."""

import logging
from uuid import UUID

from sgca.application.interfaces import ApplicationRepository, UserTypeRepository
from sgca.application.schemas import UserTypeCreate, UserTypeUpdate
from sgca.domain.entities import Application, Page, PageRequest, UserType, UserTypeState
from sgca.domain.exceptions import DuplicateEntityError, EntityNotFoundError, InvalidStateError

logger = logging.getLogger(__name__)

_ENTITY = "Tipo de usuario"
_APPLICATION_SCOPE = "en la aplicación"


class UserTypeService:
    """Orchestrates user type business logic. Depends on the repository ports (DI)."""

    def __init__(self, repository: UserTypeRepository, application_repository: ApplicationRepository):
        self._repository = repository
        self._application_repository = application_repository

    async def create_user_type(self, data: UserTypeCreate) -> UserType:
        logger.info("Creando tipo de usuario con nombre: %s", data.name)
        application = await self._resolve_application(data.application_id)
        await self._ensure_name_free(data.name, application.id)

        user_type = UserType(
            name=data.name,
            description=data.description,
            application_id=application.id,
            application_name=application.name,
            state=UserTypeState.ACTIVE,
        )
        created = await self._repository.create(user_type)
        logger.info("Tipo de usuario creado id=%s", created.id)
        return created

    async def get_user_type(self, user_type_id: UUID) -> UserType:
        logger.debug("Obteniendo tipo de usuario id=%s", user_type_id)
        user_type = await self._repository.get_by_id(user_type_id)
        if user_type is None:
            raise EntityNotFoundError(_ENTITY, user_type_id)
        return user_type

    async def page_user_types(
        self,
        page_request: PageRequest,
        *,
        name: str | None = None,
        application_id: UUID | None = None,
        state: UserTypeState | None = None,
    ) -> Page[UserType]:
        """Active user types; every filter is optional and they combine with AND."""
        logger.debug("Listando tipos de usuario página=%d tamaño=%d", page_request.page, page_request.size)
        return await self._repository.page_active(
            page_request,
            name=name.strip() if name and name.strip() else None,
            application_id=application_id,
            state=state,
        )

    async def update_user_type(self, user_type_id: UUID, data: UserTypeUpdate) -> UserType:
        logger.info("Actualizando tipo de usuario id=%s", user_type_id)
        user_type = await self.get_user_type(user_type_id)
        application = await self._resolve_application(data.application_id)
        await self._ensure_name_free(data.name, application.id, exclude_id=user_type_id)

        user_type.update(
            name=data.name,
            description=data.description,
            application_id=application.id,
            state=data.state,
        )
        user_type.application_name = application.name
        return await self._repository.update(user_type)

    async def delete_user_type(self, user_type_id: UUID) -> None:
        user_type = await self.get_user_type(user_type_id)
        user_type.mark_deleted()
        await self._repository.update(user_type)
        logger.info("Tipo de usuario eliminado id=%s", user_type_id)

    async def restore_user_type(self, user_type_id: UUID) -> UserType:
        user_type = await self._repository.get_by_id(user_type_id, include_deleted=True)
        if user_type is None:
            raise EntityNotFoundError(_ENTITY, user_type_id)
        if not user_type.is_deleted():
            raise InvalidStateError("El tipo de usuario no está eliminado")

        await self._ensure_name_free(user_type.name, user_type.application_id, exclude_id=user_type_id)

        user_type.mark_restored()
        restored = await self._repository.update(user_type)
        logger.info("Tipo de usuario restaurado id=%s", user_type_id)
        return restored

    async def change_state(self, user_type_id: UUID, state: UserTypeState) -> UserType:
        logger.info("Cambiando estado del tipo de usuario id=%s a %s", user_type_id, state.value)
        user_type = await self.get_user_type(user_type_id)
        user_type.change_state(state)
        return await self._repository.update(user_type)

    async def statistics(
        self,
        application_id: UUID | None = None,
        state: UserTypeState | None = None,
    ) -> dict[str, int]:
        """Active totals; a bucket whose filter is absent reports zero."""
        return {
            "total_active": await self._repository.count_active(),
            "total_for_application": (
                await self._repository.count_active(application_id=application_id)
                if application_id is not None
                else 0
            ),
            "total_for_state": (
                await self._repository.count_active(state=state) if state is not None else 0
            ),
        }

    async def _resolve_application(self, application_id: UUID) -> Application:
        application = await self._application_repository.get_by_id(application_id, include_deleted=True)
        if application is None:
            raise EntityNotFoundError("Aplicación", application_id)
        return application

    async def _ensure_name_free(self, name: str, application_id: UUID, exclude_id: UUID | None = None) -> None:
        if await self._repository.exists_by_name(name, application_id, exclude_id=exclude_id):
            raise DuplicateEntityError(_ENTITY, "el nombre", name, scope=_APPLICATION_SCOPE)
