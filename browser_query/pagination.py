"""Pagination and text filtering shared by the listing tools."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Callable, Generic, List, Mapping, Optional, Protocol, Sequence, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")

DEFAULT_LIMIT = 50
DEFAULT_OFFSET = 0
MAX_LIMIT = 1000


class Searchable(Protocol):
    def to_search_text(self) -> str: ...


class PaginationParams(BaseModel):
    limit: Optional[int] = Field(
        default=None,
        ge=1,
        le=MAX_LIMIT,
        description=f"Maximum number of items to return (default: {DEFAULT_LIMIT}, max: {MAX_LIMIT})",
    )
    offset: Optional[int] = Field(
        default=None,
        ge=0,
        description=f"Number of items to skip (default: {DEFAULT_OFFSET})",
    )


class FilterParams(BaseModel):
    filter: Optional[str] = Field(default=None, description="Text to search for in the content")


@dataclass(frozen=True)
class PageRequest:
    """Resolved page window. Defaults are applied here and nowhere else."""

    limit: int = DEFAULT_LIMIT
    offset: int = DEFAULT_OFFSET

    @classmethod
    def from_params(cls, params: Any = None) -> "PageRequest":
        if params is None:
            return cls()
        if isinstance(params, cls):
            return params
        if isinstance(params, Mapping):
            limit = params.get("limit")
            offset = params.get("offset")
        else:
            limit = getattr(params, "limit", None)
            offset = getattr(params, "offset", None)
        return cls(
            limit=DEFAULT_LIMIT if limit is None else limit,
            offset=DEFAULT_OFFSET if offset is None else offset,
        )


@dataclass(frozen=True)
class PaginationMetadata:
    total: int
    limit: int
    offset: int
    has_more: bool

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class PaginatedResult(Generic[T]):
    items: List[T]
    metadata: PaginationMetadata


def _search_text(item: Searchable) -> str:
    return item.to_search_text()


def apply_text_filter(
    items: Sequence[T],
    filter_text: Optional[str],
    text_extractor: Optional[Callable[[T], str]] = None,
) -> List[T]:
    """Keep items whose projected text contains ``filter_text``, ignoring case.

    An empty or missing ``filter_text`` keeps everything. Without a
    ``text_extractor`` the items are projected through ``to_search_text()``.
    """
    if not filter_text:
        return list(items)

    extract = text_extractor or _search_text
    search_term = filter_text.lower()
    return [item for item in items if search_term in extract(item).lower()]


def apply_pagination(items: Sequence[T], params: Any = None) -> PaginatedResult[T]:
    """Slice ``items`` into one page.

    ``params`` may be None, a PaginationParams, a PageRequest, a mapping or any
    object exposing ``limit``/``offset``. Bounds are expected to be validated
    already; an offset past the end yields an empty page.
    """
    window = PageRequest.from_params(params)
    limit = window.limit
    offset = window.offset
    total = len(items)

    page = list(items[offset : offset + limit])
    has_more = offset + limit < total

    return PaginatedResult(
        items=page,
        metadata=PaginationMetadata(
            total=total,
            limit=limit,
            offset=offset,
            has_more=has_more,
        ),
    )


def format_pagination_info(metadata: PaginationMetadata) -> str:
    total = metadata.total
    limit = metadata.limit
    offset = metadata.offset

    if total == 0:
        return "No items found"

    start = min(offset + 1, total)
    end = min(offset + limit, total)
    info = f"Showing {start}-{end} of {total} items"
    if metadata.has_more:
        info += f" (use offset: {offset + limit} for more)"
    return info
