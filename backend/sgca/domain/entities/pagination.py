"""Pagination value objects shared by repositories, services and the API."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortOrder:
    """Sort on one entity attribute (snake_case attribute name)."""

    field: str
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC


DEFAULT_SORT: tuple[SortOrder, ...] = (SortOrder("name"),)


@dataclass(frozen=True)
class PageRequest:
    """A 0-based page window plus its ordering."""

    page: int = 0
    size: int = 10
    sort: tuple[SortOrder, ...] = DEFAULT_SORT

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("page must be >= 0")
        if self.size < 1:
            raise ValueError("size must be >= 1")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    """One window of a paginated query together with the total row count."""

    content: list[T]
    total_elements: int
    page: int
    size: int
    sort: tuple[SortOrder, ...] = DEFAULT_SORT

    @classmethod
    def of(cls, content: list[T], total_elements: int, request: PageRequest) -> "Page[T]":
        return cls(
            content=content,
            total_elements=total_elements,
            page=request.page,
            size=request.size,
            sort=request.sort,
        )

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def is_first(self) -> bool:
        return self.page == 0

    @property
    def is_last(self) -> bool:
        return self.page + 1 >= self.total_pages
