"""Query-string parsing for paginated routes: ``page``, ``size`` and repeatable ``sort``."""

from fastapi import Query

from sgca.application.schemas.common import field_name
from sgca.domain.entities import DEFAULT_SORT, PageRequest, SortDirection, SortOrder
from sgca.domain.exceptions import DomainValidationError

MAX_PAGE_SIZE = 100


def parse_sort(values: list[str] | None) -> tuple[SortOrder, ...]:
    """Parse ``field`` / ``field,asc|desc`` entries; field names may use wire or attribute names."""
    orders: list[SortOrder] = []
    for raw in values or []:
        if not raw or not raw.strip():
            continue
        field, _, direction = raw.partition(",")
        direction = direction.strip().lower() or SortDirection.ASC.value
        try:
            parsed = SortDirection(direction)
        except ValueError:
            raise DomainValidationError(
                f"Dirección de ordenamiento no válida: {direction}",
                errors={"sort": "Use asc o desc"},
            ) from None
        orders.append(SortOrder(field_name(field), parsed))
    return tuple(orders) or DEFAULT_SORT


def page_params(
    page: int = Query(0, ge=0, description="Número de página (base 0)"),
    size: int = Query(10, ge=1, le=MAX_PAGE_SIZE, description="Tamaño de página"),
    sort: list[str] | None = Query(None, description="campo[,asc|desc]; se puede repetir"),
) -> PageRequest:
    return PageRequest(page=page, size=size, sort=parse_sort(sort))
