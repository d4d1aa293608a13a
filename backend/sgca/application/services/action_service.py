"""Application service (use case) for Action operations.

The most constraint-dense slice: an action references an existing application
and an *active* section, and its name is unique (case-insensitive) among the
active actions of that (application, section) pair.
"""

import logging
from uuid import UUID

from sgca.application.interfaces import ActionRepository, ApplicationRepository, SectionRepository
from sgca.application.schemas import ActionCreate, ActionUpdate
from sgca.domain.entities import Action, Application, Page, PageRequest, Section
from sgca.domain.exceptions import DuplicateEntityError, EntityNotFoundError, InvalidStateError

logger = logging.getLogger(__name__)

_ENTITY = "Acción"
_PAIR_SCOPE = "en la aplicación y sección especificadas"


class ActionService:
    """Orchestrates action business logic across the action, application and section ports."""

    def __init__(
        self,
        repository: ActionRepository,
        application_repository: ApplicationRepository,
        section_repository: SectionRepository,
    ):
        self._repository = repository
        self._application_repository = application_repository
        self._section_repository = section_repository

    async def create_action(self, data: ActionCreate) -> Action:
        application = await self._resolve_application(data.application_id)
        section = await self._resolve_section(data.section_id)
        await self._ensure_name_free(data.name, data.application_id, data.section_id)

        action = Action(
            name=data.name,
            description=data.description,
            application_id=application.id,
            section_id=section.id,
        )
        self._attach_parents(action, application, section)
        created = await self._repository.create(action)
        logger.info(
            "Acción creada id=%s nombre=%s aplicacion=%s seccion=%s",
            created.id, created.name, created.application_id, created.section_id,
        )
        return created

    async def get_action(self, action_id: UUID) -> Action:
        logger.debug("Obteniendo acción id=%s", action_id)
        action = await self._repository.get_by_id(action_id)
        if action is None:
            raise EntityNotFoundError(_ENTITY, action_id)
        return action

    async def list_actions(self) -> list[Action]:
        return await self._repository.list_active()

    async def page_actions(
        self,
        page_request: PageRequest,
        *,
        application_id: UUID | None = None,
        section_id: UUID | None = None,
        name: str | None = None,
    ) -> Page[Action]:
        logger.debug("Listando acciones página=%d tamaño=%d", page_request.page, page_request.size)
        return await self._repository.page_active(
            page_request,
            application_id=application_id,
            section_id=section_id,
            name=name or None,
        )

    async def search_by_name(self, name: str) -> list[Action]:
        return await self._repository.list_active(name=name)

    async def search_by_text(self, text: str) -> list[Action]:
        return await self._repository.list_active(text=text)

    async def list_by_application(self, application_id: UUID) -> list[Action]:
        return await self._repository.list_active(application_id=application_id)

    async def list_by_section(self, section_id: UUID) -> list[Action]:
        return await self._repository.list_active(section_id=section_id)

    async def list_by_application_and_section(self, application_id: UUID, section_id: UUID) -> list[Action]:
        return await self._repository.list_active(application_id=application_id, section_id=section_id)

    async def update_action(self, action_id: UUID, data: ActionUpdate) -> Action:
        action = await self.get_action(action_id)
        application = await self._resolve_application(data.application_id)
        section = await self._resolve_section(data.section_id)

        if not action.same_identity(data.name, data.application_id, data.section_id):
            await self._ensure_name_free(data.name, data.application_id, data.section_id, exclude_id=action_id)

        action.update(
            name=data.name,
            description=data.description,
            application_id=application.id,
            section_id=section.id,
        )
        self._attach_parents(action, application, section)
        updated = await self._repository.update(action)
        logger.info("Acción actualizada id=%s", action_id)
        return updated

    async def delete_action(self, action_id: UUID) -> None:
        action = await self.get_action(action_id)
        action.mark_deleted()
        await self._repository.update(action)
        logger.info("Acción eliminada id=%s", action_id)

    async def restore_action(self, action_id: UUID) -> Action:
        action = await self._repository.get_by_id(action_id, include_deleted=True)
        if action is None:
            raise EntityNotFoundError(_ENTITY, action_id)
        if not action.is_deleted():
            raise InvalidStateError("La acción no está eliminada")

        await self._ensure_name_free(action.name, action.application_id, action.section_id, exclude_id=action_id)

        action.mark_restored()
        restored = await self._repository.update(action)
        logger.info("Acción restaurada id=%s", action_id)
        return restored

    async def count_active(self) -> int:
        return await self._repository.count_active()

    async def count_by_application(self, application_id: UUID) -> int:
        return await self._repository.count_active(application_id=application_id)

    async def count_by_section(self, section_id: UUID) -> int:
        return await self._repository.count_active(section_id=section_id)

    async def exists_by_name(self, name: str, application_id: UUID, section_id: UUID) -> bool:
        return await self._repository.exists_by_name(name.strip(), application_id, section_id)

    # ── Helpers ──────────────────────────────────────────────────────

    async def _resolve_application(self, application_id: UUID) -> Application:
        # Any registered application qualifies as a parent, whatever its lifecycle.
        application = await self._application_repository.get_by_id(application_id, include_deleted=True)
        if application is None:
            raise EntityNotFoundError("Aplicación", application_id)
        return application

    async def _resolve_section(self, section_id: UUID) -> Section:
        section = await self._section_repository.get_by_id(section_id)
        if section is None:
            raise EntityNotFoundError("Sección", section_id)
        return section

    async def _ensure_name_free(
        self,
        name: str,
        application_id: UUID,
        section_id: UUID,
        exclude_id: UUID | None = None,
    ) -> None:
        if await self._repository.exists_by_name(name, application_id, section_id, exclude_id=exclude_id):
            raise DuplicateEntityError(_ENTITY, "el nombre", f"'{name}'", scope=_PAIR_SCOPE)

    @staticmethod
    def _attach_parents(action: Action, application: Application, section: Section) -> None:
        action.application_name = application.name
        action.application_key = application.identifier_key
        action.section_name = section.name
