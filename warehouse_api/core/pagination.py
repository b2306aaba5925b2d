"""Pagination — pure page-number arithmetic and search-term normalization.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - page_window(n, size) skips (n-1)*size records and takes size
    - offset never exceeds STORE_INT_MAX: a table holds at most that many rows,
      so any larger skip lands past the end just the same
    - Blank search terms mean "no filter"
"""

from warehouse_api.core.domain_types import STORE_INT_MAX, PageWindow


def page_window(page_number: int, page_size: int) -> PageWindow:
    """Translate 1-based page number and size into an offset/limit window."""
    if page_number < 1:
        raise ValueError(f"page_number must be >= 1, got {page_number}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    offset = min((page_number - 1) * page_size, STORE_INT_MAX)
    return PageWindow(offset=offset, limit=page_size)


def normalize_search(search: str | None) -> str | None:
    """Return the term to filter by, or None when no filter applies."""
    if not search:
        return None
    return search
