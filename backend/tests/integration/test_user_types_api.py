"""End-to-end tests for ``/api/tipos-usuario``."""

import pytest
from httpx import AsyncClient

from api_helpers import create_application


@pytest.mark.asyncio
async def test_user_type_names_unique_within_application(client: AsyncClient):
    first = await create_application(client, "SYS_A")
    second = await create_application(client, "SYS_B")

    response = await client.post("/api/tipos-usuario", json={"name": "Admin", "applicationId": first["id"]})
    assert response.status_code == 201
    created = response.json()["data"]
    assert created["estado"] == "ACTIVO"
    assert created["aplicacionId"] == first["id"]
    assert created["aplicacionNombre"] == first["nombre"]

    response = await client.post("/api/tipos-usuario", json={"name": "Admin", "applicationId": first["id"]})
    assert response.status_code == 400

    response = await client.post("/api/tipos-usuario", json={"name": "Admin", "applicationId": second["id"]})
    assert response.status_code == 201


@pytest.mark.asyncio
async def test_filters_state_change_and_statistics(client: AsyncClient):
    application = await create_application(client, "SYS_A")
    other = await create_application(client, "SYS_B")
    admin = (
        await client.post("/api/tipos-usuario", json={"nombre": "Administrador", "aplicacionId": application["id"]})
    ).json()["data"]
    await client.post("/api/tipos-usuario", json={"nombre": "Auditor", "aplicacionId": application["id"]})
    await client.post("/api/tipos-usuario", json={"nombre": "Administrador", "aplicacionId": other["id"]})

    response = await client.patch(f"/api/tipos-usuario/{admin['id']}/estado", params={"estado": "INACTIVO"})
    assert response.status_code == 200
    assert response.json()["data"]["estado"] == "INACTIVO"

    page = (
        await client.get(
            "/api/tipos-usuario", params={"nombre": "admin", "aplicacionId": application["id"]}
        )
    ).json()["data"]
    assert [u["id"] for u in page["content"]] == [admin["id"]]

    page = (await client.get("/api/tipos-usuario/paginado", params={"estado": "ACTIVO"})).json()["data"]
    assert page["totalElements"] == 2

    stats = (await client.get("/api/tipos-usuario/estadisticas")).json()["data"]
    assert stats == {"totalTiposUsuario": 3, "tiposUsuarioPorAplicacion": 0, "tiposUsuarioPorEstado": 0}

    stats = (
        await client.get(
            "/api/tipos-usuario/estadisticas",
            params={"aplicacionId": application["id"], "estado": "INACTIVO"},
        )
    ).json()["data"]
    assert stats == {"totalTiposUsuario": 3, "tiposUsuarioPorAplicacion": 2, "tiposUsuarioPorEstado": 1}


@pytest.mark.asyncio
async def test_update_delete_and_restore_user_type(client: AsyncClient):
    application = await create_application(client, "SYS_A")
    created = (
        await client.post("/api/tipos-usuario", json={"nombre": "Operador", "aplicacionId": application["id"]})
    ).json()["data"]

    response = await client.put(
        f"/api/tipos-usuario/{created['id']}",
        json={"nombre": "Operador", "aplicacionId": application["id"], "estado": "SUSPENDIDO"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "Error de validación"

    response = await client.put(
        f"/api/tipos-usuario/{created['id']}",
        json={"nombre": "Operador Senior", "descripcion": "Turno noche", "aplicacionId": application["id"]},
    )
    assert response.status_code == 200
    assert response.json()["data"]["nombre"] == "Operador Senior"
    assert response.json()["data"]["estado"] == "ACTIVO"

    response = await client.delete(f"/api/tipos-usuario/{created['id']}")
    assert response.status_code == 204
    assert (await client.get(f"/api/tipos-usuario/{created['id']}")).status_code == 404
    assert (await client.delete(f"/api/tipos-usuario/{created['id']}")).status_code == 404

    response = await client.post(f"/api/tipos-usuario/{created['id']}/restaurar")
    assert response.status_code == 200
    assert response.json()["data"]["nombre"] == "Operador Senior"
