"""Leaf content documents owned by a section."""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from pagetree.front_matter import FrontMatter, split_content
from pagetree.paths import components_to_path, find_content_components, read_file

from .views import PageView, page_view

if typ.TYPE_CHECKING:
    from pagetree.config import SiteConfig

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class Page:
    """A single markdown document that is not a section index.

    Attributes
    ----------
    file_path : Path
        Absolute location of the markdown file.
    relative_path : str
        Path of the file from the content root, with ``/`` separators.
    parent_path : Path
        Directory containing ``file_path``.
    components : list[str]
        Folder names from the content root down to the page's directory.
    slug : str
        Last URL segment, from front matter or the file stem.
    path : str
        ``components`` plus ``slug``, joined by ``/``.
    permalink : str
        Absolute URL built by the site configuration.
    meta : FrontMatter
        Parsed front matter.
    raw_content : str
        Markdown body, left unconverted.
    """

    file_path: Path
    relative_path: str
    parent_path: Path
    components: list[str]
    slug: str
    path: str
    permalink: str
    meta: FrontMatter
    raw_content: str = ""

    @classmethod
    def parse(cls, file_path: Path, content: str, config: SiteConfig) -> Page:
        """Build a page from its raw ``content`` and the site ``config``.

        Raises
        ------
        FrontMatterParseError
            If the front matter of ``file_path`` is missing or invalid.
        """
        meta, body = split_content(file_path, content)
        components = find_content_components(file_path, config.content_dir)
        slug = meta.slug or file_path.stem
        path = components_to_path([*components, slug])
        relative_path = components_to_path([*components, file_path.name])
        logger.debug("Parsed page %s as /%s", file_path, path)
        return cls(
            file_path=file_path,
            relative_path=relative_path,
            parent_path=file_path.parent,
            components=components,
            slug=slug,
            path=path,
            permalink=config.make_permalink(path),
            meta=meta,
            raw_content=body,
        )

    @classmethod
    def from_file(cls, path: Path, config: SiteConfig) -> Page:
        """Read ``path`` from disk and parse it into a page."""
        return cls.parse(path, read_file(path), config)

    def to_view(self) -> PageView:
        """Return the template-facing representation of this page."""
        return page_view(self)


__all__ = ["Page"]
