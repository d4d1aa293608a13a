"""End-to-end tests for ``/api/acciones``."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from api_helpers import create_action, create_application, create_section


@pytest.mark.asyncio
async def test_action_on_deleted_section_is_404(client: AsyncClient):
    application = await create_application(client, "SYS_A")
    section = await create_section(client, "Usuarios")
    await client.delete(f"/api/secciones/{section['id']}")

    response = await client.post(
        "/api/acciones",
        json={"name": "Nueva", "applicationId": application["id"], "sectionId": section["id"]},
    )
    assert response.status_code == 404
    assert response.json()["message"].startswith("Sección no encontrada")


@pytest.mark.asyncio
async def test_action_on_unknown_application_is_404(client: AsyncClient):
    section = await create_section(client)
    response = await create_action(client, "Ver", {"id": str(uuid4())}, section)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_action_names_unique_per_pair(client: AsyncClient):
    application = await create_application(client, "SYS_A")
    section = await create_section(client)

    first = await create_action(client, "Crear", application, section)
    assert first.status_code == 201
    body = first.json()["data"]
    assert body["aplicacion"] == {
        "id": application["id"],
        "nombre": application["nombre"],
        "llaveIdentificadora": "SYS_A",
    }
    assert body["seccion"] == {"id": section["id"], "nombre": "Usuarios"}
    assert body["activo"] is True

    second = await create_action(client, "crear", application, section)
    assert second.status_code == 400
    assert second.json()["success"] is False

    other_section = await create_section(client, "Reportes")
    assert (await create_action(client, "Crear", application, other_section)).status_code == 201


@pytest.mark.asyncio
async def test_deleted_application_still_accepts_actions(client: AsyncClient):
    application = await create_application(client, "SYS_A")
    section = await create_section(client)
    await client.delete(f"/api/aplicaciones/{application['id']}")

    response = await create_action(client, "Ver", application, section)
    assert response.status_code == 201
    assert response.json()["data"]["aplicacion"]["llaveIdentificadora"] == "SYS_A"


@pytest.mark.asyncio
async def test_delete_restore_and_update_action(client: AsyncClient):
    application = await create_application(client, "SYS_A")
    users = await create_section(client, "Usuarios")
    reports = await create_section(client, "Reportes")
    action = (await create_action(client, "Ver", application, users)).json()["data"]

    response = await client.delete(f"/api/acciones/{action['id']}")
    assert response.status_code == 204
    assert response.content == b""
    assert (await client.get(f"/api/acciones/{action['id']}")).status_code == 404

    response = await client.post(f"/api/acciones/{action['id']}/restaurar")
    assert response.status_code == 200

    response = await client.put(
        f"/api/acciones/{action['id']}",
        json={"nombre": "Ver", "aplicacionId": application["id"], "seccionId": reports["id"]},
    )
    assert response.status_code == 200
    assert response.json()["data"]["seccion"] == {"id": reports["id"], "nombre": "Reportes"}


@pytest.mark.asyncio
async def test_listing_precedence_statistics_and_name_check(client: AsyncClient):
    app_a = await create_application(client, "SYS_A")
    app_b = await create_application(client, "SYS_B")
    users = await create_section(client, "Usuarios")
    reports = await create_section(client, "Reportes")
    await create_action(client, "Crear", app_a, users, descripcion="Alta de usuarios")
    await create_action(client, "Listar", app_a, reports)
    await create_action(client, "Exportar", app_b, reports, descripcion="Genera informes")

    async def names(**params) -> list[str]:
        response = await client.get("/api/acciones", params=params)
        return [a["nombre"] for a in response.json()["data"]]

    assert await names() == ["Crear", "Exportar", "Listar"]
    assert await names(aplicacionId=app_a["id"], seccionId=reports["id"], nombre="zzz") == ["Listar"]
    assert await names(aplicacionId=app_a["id"]) == ["Crear", "Listar"]
    assert await names(seccionId=reports["id"]) == ["Exportar", "Listar"]
    assert await names(nombre="xpor", texto="alta") == ["Exportar"]
    assert await names(texto="informes") == ["Exportar"]

    summary = (await client.get("/api/acciones")).json()["data"][0]
    assert set(summary) == {"id", "nombre", "descripcion", "aplicacionNombre", "seccionNombre", "activo"}

    page = (
        await client.get("/api/acciones/paginado", params={"seccionId": reports["id"], "size": 1})
    ).json()["data"]
    assert page["totalElements"] == 2
    assert page["totalPages"] == 2
    assert [a["nombre"] for a in page["content"]] == ["Exportar"]

    stats = (
        await client.get("/api/acciones/estadisticas", params={"aplicacionId": app_a["id"]})
    ).json()["data"]
    assert stats == {"totalAcciones": 3, "accionesPorAplicacion": 2, "accionesPorSeccion": 0}

    check = await client.get(
        "/api/acciones/verificar-nombre",
        params={"nombre": "CREAR", "aplicacionId": app_a["id"], "seccionId": users["id"]},
    )
    assert check.json()["data"] is True
