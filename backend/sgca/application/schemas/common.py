"""Shared DTO plumbing: wire-name aliases, the response envelope and the page schema."""

from typing import Generic, TypeVar

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from sgca.domain.entities import Page

T = TypeVar("T")

# Python attribute → JSON field name on the wire. Anything not listed is camelCased.
WIRE_NAMES: dict[str, str] = {
    "name": "nombre",
    "description": "descripcion",
    "identifier_key": "llaveIdentificadora",
    "state": "estado",
    "active": "activo",
    "application": "aplicacion",
    "application_id": "aplicacionId",
    "application_name": "aplicacionNombre",
    "section": "seccion",
    "section_id": "seccionId",
    "section_name": "seccionNombre",
    "available": "disponible",
    "exists": "existe",
    "total_active": "totalActivas",
    "total_sections": "totalSecciones",
    "total_actions": "totalAcciones",
    "actions_by_application": "accionesPorAplicacion",
    "actions_by_section": "accionesPorSeccion",
    "total_user_types": "totalTiposUsuario",
    "user_types_by_application": "tiposUsuarioPorAplicacion",
    "user_types_by_state": "tiposUsuarioPorEstado",
}

_FIELD_BY_ALIAS: dict[str, str] = {wire.lower(): attr for attr, wire in WIRE_NAMES.items()}


def wire_name(field_name: str) -> str:
    return WIRE_NAMES.get(field_name, to_camel(field_name))


def field_name(alias: str) -> str:
    """Reverse of ``wire_name``: accepts wire, English camelCase or snake_case names."""
    key = alias.strip()
    if key.lower() in _FIELD_BY_ALIAS:
        return _FIELD_BY_ALIAS[key.lower()]
    snake = "".join(f"_{c.lower()}" if c.isupper() else c for c in key)
    return snake.lstrip("_")


def _accepted_names(name: str) -> AliasChoices:
    return AliasChoices(*dict.fromkeys((wire_name(name), to_camel(name), name)))


class WireModel(BaseModel):
    """Base DTO: serialises to the wire names, accepts wire, camelCase or snake_case input."""

    model_config = ConfigDict(
        alias_generator=AliasGenerator(
            validation_alias=_accepted_names,
            serialization_alias=wire_name,
        ),
        populate_by_name=True,
        from_attributes=True,
    )


def clean_description(value: object) -> object:
    """Trim descriptions; blank ones become ``None``."""
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def truncate_summary(value: str | None, limit: int = 100) -> str | None:
    if value is not None and len(value) > limit:
        return value[: limit - 3] + "..."
    return value


class ApiResponse(BaseModel, Generic[T]):
    """Uniform success envelope."""

    success: bool = True
    message: str
    data: T | None = None


class ApiErrorResponse(BaseModel):
    """Uniform failure envelope; ``errors`` is omitted when there are no field details."""

    success: bool = False
    message: str
    errors: dict[str, str] | None = None


class PageResponse(WireModel, Generic[T]):
    """Page payload: ``content`` plus the window metadata."""

    content: list[T]
    total_elements: int
    total_pages: int
    size: int
    number: int
    number_of_elements: int
    first: bool
    last: bool

    @classmethod
    def from_page(cls, page: Page, content: list) -> "PageResponse":
        return cls(
            content=content,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            size=page.size,
            number=page.page,
            number_of_elements=page.number_of_elements,
            first=page.is_first,
            last=page.is_last,
        )
