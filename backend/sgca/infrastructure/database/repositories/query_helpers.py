"""Helpers shared by the SQLAlchemy repositories: ordering, paging and flush errors."""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from sgca.domain.entities import DEFAULT_SORT, Page, PageRequest, SortOrder
from sgca.domain.exceptions import DomainError, DomainValidationError


def as_utc(value: datetime | None) -> datetime | None:
    """SQLite hands back naive datetimes; they were stored as UTC."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def order_by(sort: tuple[SortOrder, ...] | None, sortable: dict[str, Any], tiebreaker: Any) -> list[Any]:
    """Translate sort orders into ORDER BY clauses, always ending with ``tiebreaker``."""
    clauses = []
    for order in sort or DEFAULT_SORT:
        column = sortable.get(order.field)
        if column is None:
            raise DomainValidationError(
                f"Campo de ordenamiento no válido: {order.field}",
                errors={"sort": f"Campo no permitido: {order.field}"},
            )
        clauses.append(column.desc() if order.descending else column.asc())
    clauses.append(tiebreaker.asc())
    return clauses


async def count(session: AsyncSession, model: Any, criteria: list[Any]) -> int:
    stmt = select(func.count()).select_from(model).where(*criteria)
    return (await session.execute(stmt)).scalar_one()


async def fetch_page(
    session: AsyncSession,
    model: Any,
    criteria: list[Any],
    page_request: PageRequest,
    sortable: dict[str, Any],
    to_entity: Callable[[Any], Any],
) -> Page:
    total = await count(session, model, criteria)
    stmt: Select = (
        select(model)
        .where(*criteria)
        .order_by(*order_by(page_request.sort, sortable, model.id))
        .offset(page_request.offset)
        .limit(page_request.size)
    )
    result = await session.execute(stmt)
    return Page.of([to_entity(row) for row in result.scalars().unique().all()], total, page_request)


async def flush_or_conflict(session: AsyncSession, on_conflict: Callable[[], DomainError]) -> None:
    """Flush pending writes; a unique-index violation surfaces as a domain conflict."""
    try:
        await session.flush()
    except IntegrityError as exc:
        raise on_conflict() from exc
