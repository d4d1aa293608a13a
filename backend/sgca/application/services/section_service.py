"""Application service (use case) for Section operations."""

import logging
from uuid import UUID

from sgca.application.interfaces import SectionRepository
from sgca.application.schemas import SectionCreate, SectionUpdate
from sgca.domain.entities import Page, PageRequest, Section
from sgca.domain.exceptions import DuplicateEntityError, EntityNotFoundError, InvalidStateError

logger = logging.getLogger(__name__)

_ENTITY = "Sección"


class SectionService:
    """Orchestrates section business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: SectionRepository):
        self._repository = repository

    async def create_section(self, data: SectionCreate) -> Section:
        await self._ensure_name_free(data.name)
        created = await self._repository.create(Section(name=data.name, description=data.description))
        logger.info("Sección creada id=%s nombre=%s", created.id, created.name)
        return created

    async def get_section(self, section_id: UUID) -> Section:
        logger.debug("Obteniendo sección id=%s", section_id)
        section = await self._repository.get_by_id(section_id)
        if section is None:
            raise EntityNotFoundError(_ENTITY, section_id)
        return section

    async def list_sections(self) -> list[Section]:
        return await self._repository.list_active()

    async def page_sections(self, page_request: PageRequest, name: str | None = None) -> Page[Section]:
        logger.debug("Listando secciones página=%d tamaño=%d", page_request.page, page_request.size)
        return await self._repository.page_active(page_request, name=name or None)

    async def search_by_name(self, name: str) -> list[Section]:
        return await self._repository.list_active(name=name)

    async def search_by_text(self, text: str) -> list[Section]:
        """Sections whose name or description contains ``text`` (case-insensitive)."""
        return await self._repository.list_active(text=text)

    async def update_section(self, section_id: UUID, data: SectionUpdate) -> Section:
        section = await self.get_section(section_id)
        if section.name.lower() != data.name.lower():
            await self._ensure_name_free(data.name, exclude_id=section_id)

        section.update(name=data.name, description=data.description)
        updated = await self._repository.update(section)
        logger.info("Sección actualizada id=%s", section_id)
        return updated

    async def delete_section(self, section_id: UUID) -> None:
        section = await self.get_section(section_id)
        section.mark_deleted()
        await self._repository.update(section)
        logger.info("Sección eliminada id=%s", section_id)

    async def restore_section(self, section_id: UUID) -> Section:
        section = await self._repository.get_by_id(section_id, include_deleted=True)
        if section is None:
            raise EntityNotFoundError(_ENTITY, section_id)
        if not section.is_deleted():
            raise InvalidStateError("La sección no está eliminada")

        await self._ensure_name_free(section.name, exclude_id=section_id)

        section.mark_restored()
        restored = await self._repository.update(section)
        logger.info("Sección restaurada id=%s", section_id)
        return restored

    async def count_active(self) -> int:
        return await self._repository.count_active()

    async def exists_by_name(self, name: str) -> bool:
        return await self._repository.exists_by_name(name.strip())

    async def _ensure_name_free(self, name: str, exclude_id: UUID | None = None) -> None:
        if await self._repository.exists_by_name(name, exclude_id=exclude_id):
            raise DuplicateEntityError(_ENTITY, "el nombre", name)
