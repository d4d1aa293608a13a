"""Unit tests for the base entity lifecycle and pagination value objects."""

from datetime import timedelta

import pytest

from sgca.domain.entities import Page, PageRequest, Section, SortDirection, SortOrder
from sgca.domain.entities.base import utcnow


def test_new_entity_is_active():
    section = Section(name="Usuarios")
    assert section.id is not None
    assert not section.is_deleted()
    assert section.updated_at == section.created_at


def test_mark_deleted_and_restored():
    section = Section(name="Usuarios")
    section.mark_deleted()
    assert section.is_deleted()
    assert section.deleted_at == section.updated_at

    section.mark_restored()
    assert not section.is_deleted()
    assert section.deleted_at is None


def test_updated_at_strictly_increases_even_with_future_timestamp():
    future = utcnow() + timedelta(hours=1)
    section = Section(name="Usuarios", created_at=future, updated_at=future)
    section.update(name="Usuarios", description="x")
    assert section.updated_at > future


def test_page_request_validation():
    with pytest.raises(ValueError):
        PageRequest(page=-1)
    with pytest.raises(ValueError):
        PageRequest(size=0)
    assert PageRequest(page=3, size=20).offset == 60


def test_default_sort_is_name_ascending():
    request = PageRequest()
    assert request.sort == (SortOrder("name", SortDirection.ASC),)
    assert not request.sort[0].descending


def test_page_metadata():
    request = PageRequest(page=2, size=2)
    page = Page.of(["e"], 5, request)
    assert page.total_pages == 3
    assert page.number_of_elements == 1
    assert page.is_last
    assert not page.is_first

    empty = Page.of([], 0, PageRequest())
    assert empty.total_pages == 0
    assert empty.is_first and empty.is_last

