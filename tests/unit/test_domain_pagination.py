"""Unit tests for PageRequest, parse_sort and Page."""

import pytest

from src.domain.value_objects import Page, PageRequest, parse_sort
from src.domain.value_objects.filters import MEMBER_SORT_FIELDS, TASK_SORT_FIELDS


@pytest.mark.unit
class TestParseSort:
    @pytest.mark.parametrize(
        ("expression", "expected"),
        [
            ("name", ("name", False)),
            ("name asc", ("name", False)),
            ("name DESC", ("name", True)),
            ("-email", ("email", True)),
            ("+role", ("role", False)),
            ("  updated_at   desc ", ("updated_at", True)),
        ],
    )
    def test_valid_expressions(self, expression, expected):
        assert parse_sort(expression, MEMBER_SORT_FIELDS) == expected

    @pytest.mark.parametrize(
        "expression",
        [None, "", "   ", "password_hash", "name sideways", "name asc extra"],
    )
    def test_fallback_to_created_at_desc(self, expression):
        assert parse_sort(expression, MEMBER_SORT_FIELDS) == ("created_at", True)

    def test_field_must_be_whitelisted_for_resource(self):
        assert parse_sort("email", TASK_SORT_FIELDS) == ("created_at", True)
        assert parse_sort("-due_date", TASK_SORT_FIELDS) == ("due_date", True)


@pytest.mark.unit
class TestPageRequest:
    def test_build_defaults(self):
        request = PageRequest.build(
            page=None, limit=None, sort=None, allowed_sort_fields=TASK_SORT_FIELDS
        )

        assert request.page == 1
        assert request.limit == 20
        assert request.sort_field == "created_at"
        assert request.descending is True
        assert request.offset == 0

    def test_build_ignores_non_positive_values(self):
        request = PageRequest.build(
            page=0,
            limit=-5,
            sort="title",
            allowed_sort_fields=TASK_SORT_FIELDS,
            default_limit=50,
        )

        assert request.page == 1
        assert request.limit == 50
        assert request.sort_field == "title"
        assert request.descending is False

    def test_build_clamps_limit_to_max_limit(self):
        request = PageRequest.build(
            page=1,
            limit=80,
            sort=None,
            allowed_sort_fields=TASK_SORT_FIELDS,
            max_limit=50,
        )

        assert request.limit == 50

    def test_build_clamps_default_limit_too(self):
        request = PageRequest.build(
            page=1,
            limit=None,
            sort=None,
            allowed_sort_fields=TASK_SORT_FIELDS,
            default_limit=30,
            max_limit=10,
        )

        assert request.limit == 10

    def test_offset(self):
        assert PageRequest(page=3, limit=25).offset == 50


@pytest.mark.unit
class TestPage:
    @pytest.mark.parametrize(
        ("total", "limit", "pages"),
        [(0, 20, 0), (1, 20, 1), (20, 20, 1), (21, 20, 2), (5, 0, 0)],
    )
    def test_pages_is_ceiling(self, total, limit, pages):
        assert Page(items=[], total=total, page=1, limit=limit).pages == pages

    def test_map_keeps_pagination(self):
        page = Page(items=[1, 2, 3], total=9, page=2, limit=3)

        mapped = page.map(str)

        assert mapped.items == ["1", "2", "3"]
        assert (mapped.total, mapped.page, mapped.limit) == (9, 2, 3)
