"""Unit tests for the ApplicationService."""

from uuid import uuid4

import pytest

from fakes import FakeApplicationRepository
from sgca.application.schemas import ApplicationCreate, ApplicationUpdate
from sgca.application.services import ApplicationService
from sgca.domain.entities import ApplicationState, PageRequest
from sgca.domain.exceptions import (
    DomainValidationError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidStateError,
)


def _payload(**overrides) -> ApplicationCreate:
    data = {
        "nombre": "Sistema de Inventario",
        "url": "https://inventario.example.com",
        "llaveIdentificadora": "SYS_INVENTARIO",
    }
    data.update(overrides)
    return ApplicationCreate(**data)


@pytest.fixture
def service() -> ApplicationService:
    return ApplicationService(FakeApplicationRepository())


@pytest.mark.asyncio
async def test_create_application_defaults_to_active(service: ApplicationService):
    application = await service.create_application(_payload())
    assert application.id is not None
    assert application.state is ApplicationState.ACTIVE
    assert application.deleted_at is None
    assert application.updated_at >= application.created_at


@pytest.mark.asyncio
async def test_create_application_keeps_explicit_state(service: ApplicationService):
    application = await service.create_application(_payload(estado="INACTIVO"))
    assert application.state is ApplicationState.INACTIVE


@pytest.mark.asyncio
async def test_create_application_requires_payload(service: ApplicationService):
    with pytest.raises(DomainValidationError):
        await service.create_application(None)


@pytest.mark.asyncio
async def test_duplicate_identifier_key_is_rejected(service: ApplicationService):
    await service.create_application(_payload())
    with pytest.raises(DuplicateEntityError) as excinfo:
        await service.create_application(_payload(nombre="Otra", url="https://otra.example.com"))
    assert "SYS_INVENTARIO" in excinfo.value.message
    assert excinfo.value.message.startswith("Ya existe una aplicación")


@pytest.mark.asyncio
async def test_duplicate_url_is_rejected(service: ApplicationService):
    await service.create_application(_payload())
    with pytest.raises(DuplicateEntityError):
        await service.create_application(_payload(llaveIdentificadora="SYS_OTRA"))


@pytest.mark.asyncio
async def test_identifier_key_stays_reserved_after_delete(service: ApplicationService):
    created = await service.create_application(_payload())
    await service.delete_application(created.id)
    with pytest.raises(DuplicateEntityError):
        await service.create_application(_payload(url="https://nueva.example.com"))


@pytest.mark.asyncio
async def test_get_application_not_found(service: ApplicationService):
    missing = uuid4()
    with pytest.raises(EntityNotFoundError) as excinfo:
        await service.get_application(missing)
    assert excinfo.value.message == f"Aplicación no encontrada con ID: {missing}"


@pytest.mark.asyncio
async def test_get_by_identifier_key(service: ApplicationService):
    created = await service.create_application(_payload())
    found = await service.get_by_identifier_key("SYS_INVENTARIO")
    assert found.id == created.id
    with pytest.raises(EntityNotFoundError):
        await service.get_by_identifier_key("SYS_NADA")


@pytest.mark.asyncio
async def test_list_active_only_returns_active_state_sorted_by_name(service: ApplicationService):
    await service.create_application(_payload(nombre="Zeta", url="https://z.example.com", llaveIdentificadora="SYS_ZETA"))
    await service.create_application(_payload(nombre="Alfa", url="https://a.example.com", llaveIdentificadora="SYS_ALFA"))
    await service.create_application(
        _payload(nombre="Beta", url="https://b.example.com", llaveIdentificadora="SYS_BETA", estado="INACTIVO")
    )
    names = [a.name for a in await service.list_active_applications()]
    assert names == ["Alfa", "Zeta"]


@pytest.mark.asyncio
async def test_search_by_name_is_case_insensitive_and_blank_lists_active(service: ApplicationService):
    await service.create_application(_payload())
    await service.create_application(
        _payload(nombre="Portal RRHH", url="https://rrhh.example.com", llaveIdentificadora="SYS_RRHH")
    )
    found = await service.search_by_name("INVENT")
    assert [a.name for a in found] == ["Sistema de Inventario"]
    assert len(await service.search_by_name("   ")) == 2
    assert len(await service.search_by_name(None)) == 2


@pytest.mark.asyncio
async def test_page_active_applications(service: ApplicationService):
    for index in range(5):
        await service.create_application(
            _payload(nombre=f"App {index}", url=f"https://app{index}.example.com", llaveIdentificadora=f"SYS_APP_{index}")
        )
    page = await service.page_active_applications(PageRequest(page=1, size=2))
    assert page.total_elements == 5
    assert page.total_pages == 3
    assert [a.name for a in page.content] == ["App 2", "App 3"]


@pytest.mark.asyncio
async def test_update_application_rechecks_changed_key(service: ApplicationService):
    first = await service.create_application(_payload())
    await service.create_application(
        _payload(nombre="Otra", url="https://otra.example.com", llaveIdentificadora="SYS_OTRA")
    )
    with pytest.raises(DuplicateEntityError):
        await service.update_application(
            first.id,
            ApplicationUpdate(
                nombre="Renombrada", url="https://inventario.example.com", llaveIdentificadora="SYS_OTRA"
            ),
        )


@pytest.mark.asyncio
async def test_update_application_keeps_state_when_omitted(service: ApplicationService):
    created = await service.create_application(_payload(estado="INACTIVO"))
    updated = await service.update_application(
        created.id,
        ApplicationUpdate(nombre="Nuevo", url=created.url, llaveIdentificadora=created.identifier_key),
    )
    assert updated.name == "Nuevo"
    assert updated.state is ApplicationState.INACTIVE
    assert updated.updated_at > created.updated_at


@pytest.mark.asyncio
async def test_delete_then_get_is_not_found(service: ApplicationService):
    created = await service.create_application(_payload())
    await service.delete_application(created.id)
    with pytest.raises(EntityNotFoundError):
        await service.get_application(created.id)
    with pytest.raises(EntityNotFoundError):
        await service.delete_application(created.id)


@pytest.mark.asyncio
async def test_restore_application(service: ApplicationService):
    created = await service.create_application(_payload())
    await service.delete_application(created.id)
    restored = await service.restore_application(created.id)
    assert restored.deleted_at is None
    assert (await service.get_application(created.id)).id == created.id


@pytest.mark.asyncio
async def test_restore_active_application_is_invalid_state(service: ApplicationService):
    created = await service.create_application(_payload())
    with pytest.raises(InvalidStateError):
        await service.restore_application(created.id)


@pytest.mark.asyncio
async def test_change_state_and_count(service: ApplicationService):
    created = await service.create_application(_payload())
    assert await service.count_active() == 1
    changed = await service.change_state(created.id, ApplicationState.INACTIVE)
    assert changed.state is ApplicationState.INACTIVE
    assert await service.count_active() == 0
    assert await service.exists_by_identifier_key("SYS_INVENTARIO") is True
    assert await service.exists_by_identifier_key("SYS_NADA") is False


@pytest.mark.asyncio
async def test_reads_are_logged_at_debug(service: ApplicationService, caplog):
    created = await service.create_application(_payload())
    with caplog.at_level("DEBUG", logger="sgca.application.services.application_service"):
        await service.get_application(created.id)
        await service.get_by_identifier_key("SYS_INVENTARIO")

    messages = [r.getMessage() for r in caplog.records if r.levelname == "DEBUG"]
    assert f"Obteniendo aplicación id={created.id}" in messages
    assert "Obteniendo aplicación llave=SYS_INVENTARIO" in messages
