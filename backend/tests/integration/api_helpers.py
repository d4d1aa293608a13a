"""Request helpers shared by the integration tests."""

from datetime import datetime

from httpx import AsyncClient


def ts(value: str) -> datetime:
    return datetime.fromisoformat(value)


async def create_application(client: AsyncClient, key: str = "SYS_X", **overrides) -> dict:
    payload = {
        "name": f"Sistema {key}",
        "url": f"https://{key.lower()}.example",
        "identifierKey": key,
        **overrides,
    }
    response = await client.post("/api/aplicaciones", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def create_section(client: AsyncClient, name: str = "Usuarios", **overrides) -> dict:
    response = await client.post("/api/secciones", json={"nombre": name, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def create_action(client: AsyncClient, name: str, application: dict, section: dict, **overrides):
    payload = {"nombre": name, "aplicacionId": application["id"], "seccionId": section["id"], **overrides}
    return await client.post("/api/acciones", json=payload)
