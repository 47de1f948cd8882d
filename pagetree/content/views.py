"""Template-facing projections of sections and pages.

Sections and pages carry filesystem bookkeeping (absolute paths, components,
relative paths, ignored pages) that templates must never observe. The view
types here are the only shape handed to the templating engine or encoded as
JSON, and they are built on demand from the full entities.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from .page import Page
    from .section import Section


@dc.dataclass(slots=True, frozen=True)
class PageView:
    """Public representation of a page."""

    title: str | None
    description: str | None
    date: str | None
    slug: str
    path: str
    permalink: str


@dc.dataclass(slots=True, frozen=True)
class SectionView:
    """Public representation of a section and, recursively, its children.

    Attributes
    ----------
    title : str or None
        Front-matter title.
    description : str or None
        Front-matter description.
    path : str
        Logical path prefixed with ``/``; the root section is ``"/"``.
    permalink : str
        Absolute URL of the section.
    pages : list[PageView]
        Sorted child pages; ignored pages are never listed.
    subsections : list[SectionView]
        Child sections in tree order.
    """

    title: str | None
    description: str | None
    path: str
    permalink: str
    pages: list[PageView]
    subsections: list[SectionView]


def page_view(page: Page) -> PageView:
    """Project ``page`` onto the fields templates may read."""
    date = page.meta.date
    return PageView(
        title=page.meta.title,
        description=page.meta.description,
        date=date.isoformat() if date is not None else None,
        slug=page.slug,
        path=f"/{page.path}",
        permalink=page.permalink,
    )


def section_view(section: Section) -> SectionView:
    """Project ``section`` and its descendants onto template-facing fields."""
    return SectionView(
        title=section.meta.title,
        description=section.meta.description,
        path=f"/{section.path}",
        permalink=section.permalink,
        pages=[page_view(page) for page in section.pages],
        subsections=[section_view(child) for child in section.subsections],
    )


__all__ = ["PageView", "SectionView", "page_view", "section_view"]
