"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from sgca.application.services import (
    ActionService,
    ApplicationService,
    SectionService,
    UserTypeService,
)
from sgca.infrastructure.database.repositories import (
    SQLAlchemyActionRepository,
    SQLAlchemyApplicationRepository,
    SQLAlchemySectionRepository,
    SQLAlchemyUserTypeRepository,
)
from sgca.infrastructure.database.session import get_db_session


async def get_application_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ApplicationService, None]:
    """Provides an ApplicationService instance with its repository wired up."""
    yield ApplicationService(SQLAlchemyApplicationRepository(session))


async def get_section_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SectionService, None]:
    yield SectionService(SQLAlchemySectionRepository(session))


async def get_action_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ActionService, None]:
    """Provides an ActionService; all three repositories share the request session."""
    yield ActionService(
        SQLAlchemyActionRepository(session),
        SQLAlchemyApplicationRepository(session),
        SQLAlchemySectionRepository(session),
    )


async def get_user_type_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UserTypeService, None]:
    yield UserTypeService(
        SQLAlchemyUserTypeRepository(session),
        SQLAlchemyApplicationRepository(session),
    )
