"""Unit tests for the shared search body."""

import pytest
from pydantic import ValidationError

from src.domain.value_objects.filters import TASK_SORT_FIELDS
from src.schemas import common_schemas
from src.schemas.common_schemas import SearchRequest


@pytest.mark.unit
class TestSearchRequest:
    def test_page_request_uses_configured_limits(self, monkeypatch):
        monkeypatch.setattr(common_schemas.settings, "default_page_limit", 15)
        monkeypatch.setattr(common_schemas.settings, "max_page_limit", 50)

        assert SearchRequest().page_request(TASK_SORT_FIELDS).limit == 15
        assert SearchRequest(limit=80).page_request(TASK_SORT_FIELDS).limit == 50

    def test_limit_within_max_is_kept(self, monkeypatch):
        monkeypatch.setattr(common_schemas.settings, "max_page_limit", 50)

        request = SearchRequest(page=2, limit=40, sort="-title")

        page_request = request.page_request(TASK_SORT_FIELDS)
        assert page_request.limit == 40
        assert page_request.offset == 40
        assert page_request.sort_field == "title"

    def test_limit_above_100_is_rejected(self):
        with pytest.raises(ValidationError):
            SearchRequest(limit=101)
