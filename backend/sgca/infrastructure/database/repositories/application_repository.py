"""Concrete repository implementation for Application backed by SQLAlchemy."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sgca.application.interfaces import ApplicationRepository
from sgca.domain.entities import Application, ApplicationState, Page, PageRequest, SortOrder
from sgca.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from sgca.infrastructure.database.models import ApplicationModel

from .query_helpers import as_utc, count, fetch_page, flush_or_conflict, order_by

_SORTABLE = {
    "id": ApplicationModel.id,
    "name": ApplicationModel.name,
    "description": ApplicationModel.description,
    "url": ApplicationModel.url,
    "identifier_key": ApplicationModel.identifier_key,
    "state": ApplicationModel.state,
    "created_at": ApplicationModel.created_at,
    "updated_at": ApplicationModel.updated_at,
}


class SQLAlchemyApplicationRepository(ApplicationRepository):
    """Implements the ApplicationRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ApplicationModel) -> Application:
        """Map ORM model → domain entity."""
        return Application(
            id=model.id,
            name=model.name,
            description=model.description,
            url=model.url,
            identifier_key=model.identifier_key,
            state=ApplicationState(model.state),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
            deleted_at=as_utc(model.deleted_at),
        )

    def _to_model(self, entity: Application) -> ApplicationModel:
        """Map domain entity → ORM model (for creation)."""
        return ApplicationModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            url=entity.url,
            identifier_key=entity.identifier_key,
            state=entity.state.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            deleted_at=entity.deleted_at,
        )

    @staticmethod
    def _active() -> list:
        return [ApplicationModel.deleted_at.is_(None)]

    async def get_by_id(self, application_id: UUID, *, include_deleted: bool = False) -> Application | None:
        model = await self._session.get(ApplicationModel, application_id)
        if model is None or (model.deleted_at is not None and not include_deleted):
            return None
        return self._to_entity(model)

    async def get_by_identifier_key(self, identifier_key: str) -> Application | None:
        stmt = select(ApplicationModel).where(
            ApplicationModel.identifier_key == identifier_key, *self._active()
        )
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_by_state(
        self, state: ApplicationState, sort: tuple[SortOrder, ...] | None = None
    ) -> list[Application]:
        stmt = (
            select(ApplicationModel)
            .where(ApplicationModel.state == state.value, *self._active())
            .order_by(*order_by(sort, _SORTABLE, ApplicationModel.id))
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def page_by_state(self, state: ApplicationState, page_request: PageRequest) -> Page[Application]:
        criteria = [ApplicationModel.state == state.value, *self._active()]
        return await fetch_page(
            self._session, ApplicationModel, criteria, page_request, _SORTABLE, self._to_entity
        )

    async def search_by_name(self, text: str) -> list[Application]:
        stmt = (
            select(ApplicationModel)
            .where(ApplicationModel.name.icontains(text, autoescape=True), *self._active())
            .order_by(*order_by(None, _SORTABLE, ApplicationModel.id))
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def exists_by_identifier_key(self, identifier_key: str, *, exclude_id: UUID | None = None) -> bool:
        criteria = [ApplicationModel.identifier_key == identifier_key]
        if exclude_id is not None:
            criteria.append(ApplicationModel.id != exclude_id)
        return await count(self._session, ApplicationModel, criteria) > 0

    async def exists_by_url(self, url: str, *, exclude_id: UUID | None = None) -> bool:
        criteria = [ApplicationModel.url == url]
        if exclude_id is not None:
            criteria.append(ApplicationModel.id != exclude_id)
        return await count(self._session, ApplicationModel, criteria) > 0

    async def count_by_state(self, state: ApplicationState) -> int:
        return await count(
            self._session, ApplicationModel, [ApplicationModel.state == state.value, *self._active()]
        )

    async def create(self, application: Application) -> Application:
        model = self._to_model(application)
        self._session.add(model)
        await flush_or_conflict(self._session, lambda: self._conflict(application))
        return self._to_entity(model)

    async def update(self, application: Application) -> Application:
        model = await self._session.get(ApplicationModel, application.id)
        if model is None:
            raise EntityNotFoundError("Aplicación", application.id)
        model.name = application.name
        model.description = application.description
        model.url = application.url
        model.identifier_key = application.identifier_key
        model.state = application.state.value
        model.updated_at = application.updated_at
        model.deleted_at = application.deleted_at
        await flush_or_conflict(self._session, lambda: self._conflict(application))
        return self._to_entity(model)

    @staticmethod
    def _conflict(application: Application) -> DuplicateEntityError:
        return DuplicateEntityError(
            "Aplicación", "la llave identificadora o URL", f"{application.identifier_key} / {application.url}"
        )
