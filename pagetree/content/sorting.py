"""Partition a section's pages into sorted and ignored groups.

Drafts are always ignored. A section sorting by ``date`` ignores pages
without a date and lists the rest newest first; sorting by ``order`` ignores
pages without an order and lists the rest by descending order; ``none`` keeps
every non-draft page in path order. Ties fall back to the relative path so
the result never depends on filesystem walk order.
"""

from __future__ import annotations

import datetime as dt
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .page import Page


def _as_datetime(value: dt.date | dt.datetime) -> dt.datetime:
    """Normalise dates and aware datetimes to comparable naive UTC values."""
    if isinstance(value, dt.datetime):
        if value.tzinfo is None:
            return value
        return value.astimezone(dt.UTC).replace(tzinfo=None)
    return dt.datetime.combine(value, dt.time())


def _by_path(pages: cabc.Iterable[Page]) -> list[Page]:
    return sorted(pages, key=lambda page: page.relative_path)


def sort_pages(
    pages: cabc.Iterable[Page], sort_by: str
) -> tuple[list[Page], list[Page]]:
    """Return ``(sorted_pages, ignored_pages)`` for the given ``sort_by`` mode."""
    candidates = _by_path(pages)
    ignored = [page for page in candidates if page.meta.draft]
    published = [page for page in candidates if not page.meta.draft]

    match sort_by:
        case "date":
            dated = [page for page in published if page.meta.date is not None]
            ignored.extend(page for page in published if page.meta.date is None)
            dated.sort(
                key=lambda page: _as_datetime(page.meta.date),  # type: ignore[arg-type]
                reverse=True,
            )
            return dated, _by_path(ignored)
        case "order":
            ordered = [page for page in published if page.meta.order is not None]
            ignored.extend(page for page in published if page.meta.order is None)
            ordered.sort(key=lambda page: page.meta.order, reverse=True)  # type: ignore[arg-type, return-value]
            return ordered, _by_path(ignored)
        case _:
            return published, _by_path(ignored)


__all__ = ["sort_pages"]
