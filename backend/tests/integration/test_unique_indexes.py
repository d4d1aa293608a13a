"""Database unique indexes reject duplicates that skip the service-level checks."""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from sgca.domain.entities import Action, Application, Section
from sgca.domain.exceptions import DuplicateEntityError
from sgca.infrastructure.database.repositories import (
    SQLAlchemyActionRepository,
    SQLAlchemyApplicationRepository,
    SQLAlchemySectionRepository,
)


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def _save_application(factory, application: Application) -> Application:
    async with factory() as session:
        created = await SQLAlchemyApplicationRepository(session).create(application)
        await session.commit()
    return created


async def _save_section(factory, section: Section) -> Section:
    async with factory() as session:
        created = await SQLAlchemySectionRepository(session).create(section)
        await session.commit()
    return created


@pytest.mark.asyncio
async def test_section_name_index_ignores_case(session_factory):
    await _save_section(session_factory, Section(name="Reportes"))

    async with session_factory() as session:
        with pytest.raises(DuplicateEntityError):
            await SQLAlchemySectionRepository(session).create(Section(name="REPORTES"))
        await session.rollback()


@pytest.mark.asyncio
async def test_section_name_index_skips_deleted_rows(session_factory):
    section = await _save_section(session_factory, Section(name="Archivo"))
    section.mark_deleted()
    async with session_factory() as session:
        await SQLAlchemySectionRepository(session).update(section)
        await session.commit()

    recreated = await _save_section(session_factory, Section(name="archivo"))
    assert recreated.id != section.id


@pytest.mark.asyncio
async def test_application_identifier_key_index(session_factory):
    await _save_application(
        session_factory,
        Application(name="Sistema A", url="https://a.example.com", identifier_key="SYS_A"),
    )

    async with session_factory() as session:
        with pytest.raises(DuplicateEntityError):
            await SQLAlchemyApplicationRepository(session).create(
                Application(name="Sistema B", url="https://b.example.com", identifier_key="SYS_A")
            )
        await session.rollback()


@pytest.mark.asyncio
async def test_application_url_index(session_factory):
    await _save_application(
        session_factory,
        Application(name="Sistema A", url="https://a.example.com", identifier_key="SYS_A"),
    )

    async with session_factory() as session:
        with pytest.raises(DuplicateEntityError):
            await SQLAlchemyApplicationRepository(session).create(
                Application(name="Sistema B", url="https://a.example.com", identifier_key="SYS_B")
            )
        await session.rollback()


@pytest.mark.asyncio
async def test_action_index_covers_name_application_and_section(session_factory):
    application = await _save_application(
        session_factory,
        Application(name="Sistema A", url="https://a.example.com", identifier_key="SYS_A"),
    )
    ventas = await _save_section(session_factory, Section(name="Ventas"))
    compras = await _save_section(session_factory, Section(name="Compras"))

    async with session_factory() as session:
        await SQLAlchemyActionRepository(session).create(
            Action(name="Aprobar", application_id=application.id, section_id=ventas.id)
        )
        await session.commit()

    # Same name in another section is a different action.
    async with session_factory() as session:
        other = await SQLAlchemyActionRepository(session).create(
            Action(name="Aprobar", application_id=application.id, section_id=compras.id)
        )
        await session.commit()
    assert other.section_name == "Compras"

    async with session_factory() as session:
        with pytest.raises(DuplicateEntityError):
            await SQLAlchemyActionRepository(session).create(
                Action(name="aprobar", application_id=application.id, section_id=ventas.id)
            )
        await session.rollback()
