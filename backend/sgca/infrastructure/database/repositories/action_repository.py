"""Concrete repository implementation for Action backed by SQLAlchemy.

Actions are loaded together with their application and section (joined
eager load) so the response labels never trigger lazy I/O.
"""

from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from sgca.application.interfaces import ActionRepository
from sgca.domain.entities import Action, Page, PageRequest, SortOrder
from sgca.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from sgca.infrastructure.database.models import ActionModel

from .query_helpers import as_utc, count, fetch_page, flush_or_conflict, order_by

_SORTABLE = {
    "id": ActionModel.id,
    "name": ActionModel.name,
    "description": ActionModel.description,
    "application_id": ActionModel.application_id,
    "section_id": ActionModel.section_id,
    "created_at": ActionModel.created_at,
    "updated_at": ActionModel.updated_at,
}

_PARENTS = ["application", "section"]


class SQLAlchemyActionRepository(ActionRepository):
    """Implements the ActionRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ActionModel) -> Action:
        return Action(
            id=model.id,
            name=model.name,
            description=model.description,
            application_id=model.application_id,
            section_id=model.section_id,
            application_name=model.application.name if model.application else None,
            application_key=model.application.identifier_key if model.application else None,
            section_name=model.section.name if model.section else None,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
            deleted_at=as_utc(model.deleted_at),
        )

    def _to_model(self, entity: Action) -> ActionModel:
        return ActionModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            application_id=entity.application_id,
            section_id=entity.section_id,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            deleted_at=entity.deleted_at,
        )

    @staticmethod
    def _criteria(
        *,
        application_id: UUID | None = None,
        section_id: UUID | None = None,
        name: str | None = None,
        text: str | None = None,
    ) -> list:
        criteria = [ActionModel.deleted_at.is_(None)]
        if application_id is not None:
            criteria.append(ActionModel.application_id == application_id)
        if section_id is not None:
            criteria.append(ActionModel.section_id == section_id)
        if name:
            criteria.append(ActionModel.name.icontains(name, autoescape=True))
        if text:
            criteria.append(
                or_(
                    ActionModel.name.icontains(text, autoescape=True),
                    ActionModel.description.icontains(text, autoescape=True),
                )
            )
        return criteria

    async def get_by_id(self, action_id: UUID, *, include_deleted: bool = False) -> Action | None:
        model = await self._session.get(ActionModel, action_id)
        if model is None or (model.deleted_at is not None and not include_deleted):
            return None
        return self._to_entity(model)

    async def list_active(
        self,
        *,
        application_id: UUID | None = None,
        section_id: UUID | None = None,
        name: str | None = None,
        text: str | None = None,
        sort: tuple[SortOrder, ...] | None = None,
    ) -> list[Action]:
        criteria = self._criteria(application_id=application_id, section_id=section_id, name=name, text=text)
        stmt = select(ActionModel).where(*criteria).order_by(*order_by(sort, _SORTABLE, ActionModel.id))
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().unique().all()]

    async def page_active(
        self,
        page_request: PageRequest,
        *,
        application_id: UUID | None = None,
        section_id: UUID | None = None,
        name: str | None = None,
    ) -> Page[Action]:
        criteria = self._criteria(application_id=application_id, section_id=section_id, name=name)
        return await fetch_page(self._session, ActionModel, criteria, page_request, _SORTABLE, self._to_entity)

    async def exists_by_name(
        self,
        name: str,
        application_id: UUID,
        section_id: UUID,
        *,
        exclude_id: UUID | None = None,
    ) -> bool:
        criteria = [
            func.lower(ActionModel.name) == func.lower(name),
            *self._criteria(application_id=application_id, section_id=section_id),
        ]
        if exclude_id is not None:
            criteria.append(ActionModel.id != exclude_id)
        return await count(self._session, ActionModel, criteria) > 0

    async def count_active(
        self, *, application_id: UUID | None = None, section_id: UUID | None = None
    ) -> int:
        return await count(
            self._session, ActionModel, self._criteria(application_id=application_id, section_id=section_id)
        )

    async def create(self, action: Action) -> Action:
        model = self._to_model(action)
        self._session.add(model)
        await flush_or_conflict(self._session, lambda: self._conflict(action))
        await self._session.refresh(model, attribute_names=_PARENTS)
        return self._to_entity(model)

    async def update(self, action: Action) -> Action:
        model = await self._session.get(ActionModel, action.id)
        if model is None:
            raise EntityNotFoundError("Acción", action.id)
        model.name = action.name
        model.description = action.description
        model.application_id = action.application_id
        model.section_id = action.section_id
        model.updated_at = action.updated_at
        model.deleted_at = action.deleted_at
        await flush_or_conflict(self._session, lambda: self._conflict(action))
        await self._session.refresh(model, attribute_names=_PARENTS)
        return self._to_entity(model)

    @staticmethod
    def _conflict(action: Action) -> DuplicateEntityError:
        return DuplicateEntityError(
            "Acción", "el nombre", f"'{action.name}'", scope="en la aplicación y sección especificadas"
        )
