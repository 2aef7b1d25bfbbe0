"""Pagination normalization for list responses."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from .exceptions import PaginationError

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 25
DEFAULT_TOTAL_ENTRIES = 0
DEFAULT_LAST_PAGE = 1
DEFAULT_MAX_PAGES = 10_000


@dataclass(frozen=True, slots=True)
class PaginationLinks:
    first: str | None = None
    last: str | None = None
    prev: str | None = None
    next: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {"first": self.first, "last": self.last, "prev": self.prev, "next": self.next}


@dataclass(frozen=True, slots=True)
class PaginationView:
    """Page position and navigation links derived from ``meta.pagination``."""

    current_page: int
    per_page: int
    total: int
    last_page: int
    from_: int
    to: int
    has_more_pages: bool
    links: PaginationLinks = field(default_factory=PaginationLinks)

    def to_dict(self) -> dict[str, Any]:
        return {
            "current_page": self.current_page,
            "per_page": self.per_page,
            "total": self.total,
            "last_page": self.last_page,
            "from": self.from_,
            "to": self.to,
            "has_more_pages": self.has_more_pages,
            "links": self.links.to_dict(),
        }


def paginate(raw: Mapping[str, Any] | None) -> PaginationView:
    """Derive a `PaginationView` from the raw ``meta.pagination`` object.

    Missing keys, and keys the API sends as ``null``, fall back to the
    defaults page=1, per_page=25, total_entries=0, last_page=1.
    """

    raw = raw or {}
    page = _value(raw, "page", DEFAULT_PAGE)
    per_page = _value(raw, "per_page", DEFAULT_PER_PAGE)
    total_entries = _value(raw, "total_entries", DEFAULT_TOTAL_ENTRIES)
    last_page = _value(raw, "last_page", DEFAULT_LAST_PAGE)
    previous_page = raw.get("previous_page")
    next_page = raw.get("next_page")

    links = PaginationLinks(
        first="?page=1" if page > 1 else None,
        last=f"?page={last_page}" if last_page > 1 else None,
        prev=f"?page={previous_page}" if previous_page else None,
        next=f"?page={next_page}" if next_page else None,
    )
    return PaginationView(
        current_page=page,
        per_page=per_page,
        total=total_entries,
        last_page=last_page,
        from_=(page - 1) * per_page + 1,
        to=min(page * per_page, total_entries),
        has_more_pages=next_page is not None,
        links=links,
    )


def pagination_of(body: Mapping[str, Any]) -> PaginationView:
    meta = body.get("meta") or {}
    return paginate(meta.get("pagination") if isinstance(meta, Mapping) else None)


def iterate_pages(
    fetch_page: Callable[[int], Mapping[str, Any]],
    *,
    start_page: int = DEFAULT_PAGE,
    max_pages: int = DEFAULT_MAX_PAGES,
) -> Iterator[Mapping[str, Any]]:
    """Yield decoded page bodies, following ``meta.pagination.next_page``."""

    current = start_page
    seen_pages: set[int] = {current}

    for _ in range(max_pages):
        body = fetch_page(current)
        yield body

        next_page = _next_page(body)
        if not next_page:
            return
        if next_page in seen_pages:
            raise PaginationError(f"Pagination loop detected at page {next_page}")
        seen_pages.add(next_page)
        current = next_page

    raise PaginationError("Exceeded pagination guardrail (max_pages)")


def _next_page(body: Mapping[str, Any]) -> Any:
    meta = body.get("meta")
    if not isinstance(meta, Mapping):
        return None
    pagination = meta.get("pagination")
    if not isinstance(pagination, Mapping):
        return None
    return pagination.get("next_page")


def _value(raw: Mapping[str, Any], key: str, default: int) -> int:
    value = raw.get(key)
    return default if value is None else value


__all__ = [
    "PaginationLinks",
    "PaginationView",
    "iterate_pages",
    "paginate",
    "pagination_of",
]
