"""Concrete repository implementation for Section backed by SQLAlchemy."""

from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from sgca.application.interfaces import SectionRepository
from sgca.domain.entities import Page, PageRequest, Section, SortOrder
from sgca.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from sgca.infrastructure.database.models import SectionModel

from .query_helpers import as_utc, count, fetch_page, flush_or_conflict, order_by

_SORTABLE = {
    "id": SectionModel.id,
    "name": SectionModel.name,
    "description": SectionModel.description,
    "created_at": SectionModel.created_at,
    "updated_at": SectionModel.updated_at,
}


class SQLAlchemySectionRepository(SectionRepository):
    """Implements the SectionRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: SectionModel) -> Section:
        return Section(
            id=model.id,
            name=model.name,
            description=model.description,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
            deleted_at=as_utc(model.deleted_at),
        )

    def _to_model(self, entity: Section) -> SectionModel:
        return SectionModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            deleted_at=entity.deleted_at,
        )

    @staticmethod
    def _criteria(*, name: str | None = None, text: str | None = None) -> list:
        criteria = [SectionModel.deleted_at.is_(None)]
        if name:
            criteria.append(SectionModel.name.icontains(name, autoescape=True))
        if text:
            criteria.append(
                or_(
                    SectionModel.name.icontains(text, autoescape=True),
                    SectionModel.description.icontains(text, autoescape=True),
                )
            )
        return criteria

    async def get_by_id(self, section_id: UUID, *, include_deleted: bool = False) -> Section | None:
        model = await self._session.get(SectionModel, section_id)
        if model is None or (model.deleted_at is not None and not include_deleted):
            return None
        return self._to_entity(model)

    async def list_active(
        self,
        *,
        name: str | None = None,
        text: str | None = None,
        sort: tuple[SortOrder, ...] | None = None,
    ) -> list[Section]:
        stmt = (
            select(SectionModel)
            .where(*self._criteria(name=name, text=text))
            .order_by(*order_by(sort, _SORTABLE, SectionModel.id))
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def page_active(self, page_request: PageRequest, *, name: str | None = None) -> Page[Section]:
        return await fetch_page(
            self._session, SectionModel, self._criteria(name=name), page_request, _SORTABLE, self._to_entity
        )

    async def exists_by_name(self, name: str, *, exclude_id: UUID | None = None) -> bool:
        criteria = [
            func.lower(SectionModel.name) == func.lower(name),
            SectionModel.deleted_at.is_(None),
        ]
        if exclude_id is not None:
            criteria.append(SectionModel.id != exclude_id)
        return await count(self._session, SectionModel, criteria) > 0

    async def count_active(self) -> int:
        return await count(self._session, SectionModel, self._criteria())

    async def create(self, section: Section) -> Section:
        model = self._to_model(section)
        self._session.add(model)
        await flush_or_conflict(self._session, lambda: DuplicateEntityError("Sección", "el nombre", section.name))
        return self._to_entity(model)

    async def update(self, section: Section) -> Section:
        model = await self._session.get(SectionModel, section.id)
        if model is None:
            raise EntityNotFoundError("Sección", section.id)
        model.name = section.name
        model.description = section.description
        model.updated_at = section.updated_at
        model.deleted_at = section.deleted_at
        await flush_or_conflict(self._session, lambda: DuplicateEntityError("Sección", "el nombre", section.name))
        return self._to_entity(model)
