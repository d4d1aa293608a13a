"""End-to-end tests for ``/api/secciones``."""

import pytest
from httpx import AsyncClient

from api_helpers import create_section, ts


@pytest.mark.asyncio
async def test_soft_deleted_section_is_invisible_until_restored(client: AsyncClient):
    section = await create_section(client, "Reportes")

    response = await client.delete(f"/api/secciones/{section['id']}")
    assert response.status_code == 200
    assert response.json()["message"] == "Sección eliminada exitosamente"

    assert (await client.get(f"/api/secciones/{section['id']}")).status_code == 404
    assert (await client.get("/api/secciones")).json()["data"] == []

    response = await client.post(f"/api/secciones/{section['id']}/restaurar")
    assert response.status_code == 200
    restored = response.json()["data"]
    assert restored["activo"] is True
    assert restored["deletedAt"] is None
    assert restored["nombre"] == section["nombre"]
    assert ts(restored["updatedAt"]) > ts(section["updatedAt"])

    assert (await client.get(f"/api/secciones/{section['id']}")).status_code == 200


@pytest.mark.asyncio
async def test_paginated_sections(client: AsyncClient):
    for index in range(25):
        await create_section(client, f"Sección {index:02d}")

    response = await client.get("/api/secciones/paginated", params={"page": 1, "size": 10, "sort": "nombre,asc"})
    assert response.status_code == 200
    page = response.json()["data"]
    assert len(page["content"]) == 10
    assert page["totalElements"] == 25
    assert page["number"] == 1
    assert page["totalPages"] == 3
    assert page["content"][0]["nombre"] == "Sección 10"


@pytest.mark.asyncio
async def test_pages_are_disjoint_and_cover_the_listing(client: AsyncClient):
    for name in ["Beta", "alfa", "Gamma", "delta", "Épsilon", "Zeta", "Eta"]:
        await create_section(client, name)

    listing = [s["id"] for s in (await client.get("/api/secciones")).json()["data"]]
    collected: list[str] = []
    for number in range(3):
        page = (
            await client.get("/api/secciones/paginado", params={"page": number, "size": 3})
        ).json()["data"]
        collected.extend(s["id"] for s in page["content"])

    assert collected == listing
    assert len(set(collected)) == 7


@pytest.mark.asyncio
async def test_sort_descending_and_invalid_sort(client: AsyncClient):
    for name in ["Alfa", "Beta", "Gamma"]:
        await create_section(client, name)

    page = (await client.get("/api/secciones/paginado", params={"sort": "nombre,desc"})).json()["data"]
    assert [s["nombre"] for s in page["content"]] == ["Gamma", "Beta", "Alfa"]

    response = await client.get("/api/secciones/paginado", params={"sort": "contrasena,asc"})
    assert response.status_code == 400
    assert response.json()["success"] is False

    assert (await client.get("/api/secciones/paginado", params={"size": 101})).status_code == 400
    assert (await client.get("/api/secciones/paginado", params={"page": -1})).status_code == 400


@pytest.mark.asyncio
async def test_name_uniqueness_and_availability(client: AsyncClient):
    section = await create_section(client, "Reportes")

    response = await client.post("/api/secciones", json={"nombre": "REPORTES"})
    assert response.status_code == 400

    availability = (await client.get("/api/secciones/verificar-nombre", params={"nombre": "reportes"})).json()
    assert availability["message"] == "El nombre ya está en uso"
    assert availability["data"] == {"nombre": "reportes", "disponible": False, "existe": True}

    await client.delete(f"/api/secciones/{section['id']}")
    availability = (await client.get("/api/secciones/verificar-nombre", params={"nombre": "reportes"})).json()
    assert availability["data"]["disponible"] is True

    await create_section(client, "reportes")
    response = await client.post(f"/api/secciones/{section['id']}/restaurar")
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_filters_statistics_and_update(client: AsyncClient):
    first = await create_section(client, "Reportes", descripcion="Informes " + "x" * 120)
    await create_section(client, "Usuarios", descripcion="Altas y bajas")

    by_name = (await client.get("/api/secciones", params={"nombre": "port"})).json()["data"]
    assert [s["nombre"] for s in by_name] == ["Reportes"]
    assert by_name[0]["descripcion"].endswith("...")
    assert len(by_name[0]["descripcion"]) == 100

    by_text = (await client.get("/api/secciones", params={"texto": "altas"})).json()["data"]
    assert [s["nombre"] for s in by_text] == ["Usuarios"]

    stats = (await client.get("/api/secciones/estadisticas")).json()["data"]
    assert stats == {"totalSecciones": 2}

    response = await client.put(f"/api/secciones/{first['id']}", json={"nombre": "Informes", "descripcion": " "})
    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["nombre"] == "Informes"
    assert updated["descripcion"] is None
