"""Concrete repository implementation for UserType backed by SQLAlchemy."""

from uuid import UUID

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from sgca.application.interfaces import UserTypeRepository
from sgca.domain.entities import Page, PageRequest, UserType, UserTypeState
from sgca.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from sgca.infrastructure.database.models import UserTypeModel

from .query_helpers import as_utc, count, fetch_page, flush_or_conflict

_SORTABLE = {
    "id": UserTypeModel.id,
    "name": UserTypeModel.name,
    "description": UserTypeModel.description,
    "application_id": UserTypeModel.application_id,
    "state": UserTypeModel.state,
    "created_at": UserTypeModel.created_at,
    "updated_at": UserTypeModel.updated_at,
}


class SQLAlchemyUserTypeRepository(UserTypeRepository):
    """Implements the UserTypeRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserTypeModel) -> UserType:
        return UserType(
            id=model.id,
            name=model.name,
            description=model.description,
            application_id=model.application_id,
            application_name=model.application.name if model.application else None,
            state=UserTypeState(model.state),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
            deleted_at=as_utc(model.deleted_at),
        )

    def _to_model(self, entity: UserType) -> UserTypeModel:
        return UserTypeModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            application_id=entity.application_id,
            state=entity.state.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            deleted_at=entity.deleted_at,
        )

    @staticmethod
    def _criteria(
        *,
        name: str | None = None,
        application_id: UUID | None = None,
        state: UserTypeState | None = None,
    ) -> list:
        criteria = [UserTypeModel.deleted_at.is_(None)]
        if name:
            criteria.append(UserTypeModel.name.icontains(name, autoescape=True))
        if application_id is not None:
            criteria.append(UserTypeModel.application_id == application_id)
        if state is not None:
            criteria.append(UserTypeModel.state == state.value)
        return criteria

    async def get_by_id(self, user_type_id: UUID, *, include_deleted: bool = False) -> UserType | None:
        model = await self._session.get(UserTypeModel, user_type_id)
        if model is None or (model.deleted_at is not None and not include_deleted):
            return None
        return self._to_entity(model)

    async def page_active(
        self,
        page_request: PageRequest,
        *,
        name: str | None = None,
        application_id: UUID | None = None,
        state: UserTypeState | None = None,
    ) -> Page[UserType]:
        criteria = self._criteria(name=name, application_id=application_id, state=state)
        return await fetch_page(self._session, UserTypeModel, criteria, page_request, _SORTABLE, self._to_entity)

    async def exists_by_name(
        self, name: str, application_id: UUID, *, exclude_id: UUID | None = None
    ) -> bool:
        criteria = [
            func.lower(UserTypeModel.name) == func.lower(name),
            *self._criteria(application_id=application_id),
        ]
        if exclude_id is not None:
            criteria.append(UserTypeModel.id != exclude_id)
        return await count(self._session, UserTypeModel, criteria) > 0

    async def count_active(
        self, *, application_id: UUID | None = None, state: UserTypeState | None = None
    ) -> int:
        return await count(
            self._session, UserTypeModel, self._criteria(application_id=application_id, state=state)
        )

    async def create(self, user_type: UserType) -> UserType:
        model = self._to_model(user_type)
        self._session.add(model)
        await flush_or_conflict(self._session, lambda: self._conflict(user_type))
        await self._session.refresh(model, attribute_names=["application"])
        return self._to_entity(model)

    async def update(self, user_type: UserType) -> UserType:
        model = await self._session.get(UserTypeModel, user_type.id)
        if model is None:
            raise EntityNotFoundError("Tipo de usuario", user_type.id)
        model.name = user_type.name
        model.description = user_type.description
        model.application_id = user_type.application_id
        model.state = user_type.state.value
        model.updated_at = user_type.updated_at
        model.deleted_at = user_type.deleted_at
        await flush_or_conflict(self._session, lambda: self._conflict(user_type))
        await self._session.refresh(model, attribute_names=["application"])
        return self._to_entity(model)

    @staticmethod
    def _conflict(user_type: UserType) -> DuplicateEntityError:
        return DuplicateEntityError("Tipo de usuario", "el nombre", user_type.name, scope="en la aplicación")
