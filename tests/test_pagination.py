from __future__ import annotations

import pytest
from pydantic import ValidationError

from browser_query.pagination import (
    DEFAULT_LIMIT,
    FilterParams,
    PageRequest,
    PaginationMetadata,
    PaginationParams,
    apply_pagination,
    apply_text_filter,
    format_pagination_info,
)


def _records(n: int) -> list:
    return [f"record-{i}" for i in range(n)]


def test_first_page_of_120_has_more() -> None:
    result = apply_pagination(_records(120), {"limit": 50, "offset": 0})

    assert len(result.items) == 50
    assert result.items[0] == "record-0"
    assert result.metadata.has_more is True
    assert result.metadata.total == 120
    assert format_pagination_info(result.metadata) == "Showing 1-50 of 120 items (use offset: 50 for more)"


def test_last_partial_page_of_120() -> None:
    result = apply_pagination(_records(120), {"limit": 50, "offset": 100})

    assert len(result.items) == 20
    assert result.items[-1] == "record-119"
    assert result.metadata.has_more is False
    assert format_pagination_info(result.metadata) == "Showing 101-120 of 120 items"


def test_defaults_are_resolved_into_metadata() -> None:
    result = apply_pagination(_records(3))

    assert result.metadata == PaginationMetadata(total=3, limit=DEFAULT_LIMIT, offset=0, has_more=False)
    assert result.items == _records(3)


def test_none_values_in_params_take_defaults() -> None:
    result = apply_pagination(_records(60), PaginationParams(limit=None, offset=None))

    assert result.metadata.limit == 50
    assert result.metadata.offset == 0
    assert result.metadata.has_more is True


def test_offset_past_end_gives_empty_page() -> None:
    for offset in (5, 6, 500):
        result = apply_pagination(_records(5), {"offset": offset, "limit": 10})
        assert result.items == []
        assert result.metadata.has_more is False
        assert result.metadata.total == 5


def test_page_length_matches_window() -> None:
    items = _records(17)
    for limit in (1, 4, 17, 50):
        for offset in (0, 3, 16, 17, 30):
            result = apply_pagination(items, PageRequest(limit=limit, offset=offset))
            assert len(result.items) == min(limit, max(0, len(items) - offset))
            assert result.metadata.has_more == (offset + limit < len(items))


def test_empty_input() -> None:
    result = apply_pagination([])

    assert result.items == []
    assert result.metadata.total == 0
    assert format_pagination_info(result.metadata) == "No items found"


def test_no_items_message_ignores_other_fields() -> None:
    metadata = PaginationMetadata(total=0, limit=10, offset=40, has_more=True)

    assert format_pagination_info(metadata) == "No items found"


def test_pagination_does_not_mutate_input() -> None:
    items = _records(10)
    apply_pagination(items, {"limit": 3, "offset": 2})

    assert items == _records(10)


def test_page_request_from_object_attributes() -> None:
    class Params:
        limit = 7
        offset = None

    assert PageRequest.from_params(Params()) == PageRequest(limit=7, offset=0)


def test_text_filter_matches_case_insensitively_in_order() -> None:
    lines = ["boot ok", "ERROR: disk", "warn", "Error in handler", "done"]

    filtered = apply_text_filter(lines, "error", lambda line: line)

    assert filtered == ["ERROR: disk", "Error in handler"]
    assert apply_text_filter(["Foo"], "foo", str) == apply_text_filter(["Foo"], "FOO", str)

    result = apply_pagination(filtered)
    assert result.metadata.total == 2
    assert result.items == ["ERROR: disk", "Error in handler"]


def test_text_filter_is_idempotent() -> None:
    lines = ["alpha", "Alphabet", "beta", "ALPHA"]
    once = apply_text_filter(lines, "alp", str)

    assert apply_text_filter(once, "alp", str) == once


@pytest.mark.parametrize("query", [None, ""])
def test_empty_query_keeps_everything(query) -> None:
    lines = ["b", "a", "c"]

    filtered = apply_text_filter(lines, query, str)

    assert filtered == ["b", "a", "c"]
    assert lines == ["b", "a", "c"]


def test_text_filter_uses_search_text_by_default() -> None:
    class Entry:
        def __init__(self, text: str) -> None:
            self.text = text

        def to_search_text(self) -> str:
            return self.text

    entries = [Entry("GET /api"), Entry("POST /login")]

    assert apply_text_filter(entries, "login") == [entries[1]]


@pytest.mark.parametrize("payload", [{"limit": 0}, {"limit": 1001}, {"offset": -1}])
def test_schema_rejects_out_of_range_window(payload) -> None:
    with pytest.raises(ValidationError):
        PaginationParams(**payload)


def test_schema_accepts_bounds() -> None:
    assert PaginationParams(limit=1, offset=0).limit == 1
    assert PaginationParams(limit=1000).limit == 1000
    assert FilterParams().filter is None
