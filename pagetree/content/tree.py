"""Assemble the section tree from a content directory.

The loader walks ``content_dir`` once, parses every ``_index.md`` into a
:class:`Section` and every other markdown file into a :class:`Page`, then
hands each section the pages living directly in its directory and moves each
section into its nearest ancestor, deepest sections first. A document that
fails to read or parse is recorded in :attr:`ContentTree.errors` and skipped;
its siblings keep loading.

Example
-------
>>> from pathlib import Path
>>> from pagetree.config import load_site_config
>>> config = load_site_config(Path("site.yaml"))  # doctest: +SKIP
>>> tree = load_content_tree(config)  # doctest: +SKIP
>>> [section.path for section in tree.top_level_sections()]  # doctest: +SKIP
['blog', 'docs']
"""

from __future__ import annotations

import collections
import dataclasses as dc
import logging
import typing as typ

from pagetree._constants import CONTENT_SUFFIX, SECTION_INDEX_FILENAME
from pagetree.errors import (
    ContentTreeError,
    FileReadError,
    FrontMatterParseError,
    PagetreeError,
)

from .page import Page
from .section import Section
from .sorting import sort_pages

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from pagetree.config import SiteConfig
    from pagetree.templating import TemplateEngine

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class ContentTree:
    """A fully assembled section hierarchy, read-only once built.

    Attributes
    ----------
    root : Section
        Section built from the content root's ``_index.md``.
    config : SiteConfig
        Configuration the tree was loaded with.
    page_files : list[Path]
        Every page file that parsed successfully, attached or not.
    errors : list[PagetreeError]
        Per-document failures collected while loading.
    """

    root: Section
    config: SiteConfig
    page_files: list[Path] = dc.field(default_factory=list)
    errors: list[PagetreeError] = dc.field(default_factory=list)

    def top_level_sections(self) -> list[Section]:
        """Return the direct subsections of the root."""
        return self.root.subsections

    def sections(self) -> cabc.Iterator[Section]:
        """Yield every section, parents before their children."""
        stack = [self.root]
        while stack:
            section = stack.pop()
            yield section
            stack.extend(reversed(section.subsections))

    def get_section(self, path: str) -> Section:
        """Return the section whose logical path is ``path``.

        Raises
        ------
        KeyError
            If no section has that path.
        """
        wanted = path.strip("/")
        for section in self.sections():
            if section.path == wanted:
                return section
        msg = f"Unknown section '/{wanted}'."
        raise KeyError(msg)

    def orphan_pages(self) -> list[Path]:
        """Return page files that no section claims."""
        claimed: set[Path] = set()
        for section in self.sections():
            claimed.update(section.all_pages_path())
        return [path for path in self.page_files if path not in claimed]

    def render_section(self, path: str, engine: TemplateEngine) -> str:
        """Render the section at ``path`` with the tree's top-level sections."""
        section = self.get_section(path)
        return section.render_html(self.top_level_sections(), engine, self.config)


def load_content_tree(config: SiteConfig) -> ContentTree:
    """Walk ``config.content_dir`` and build the section tree.

    Raises
    ------
    ContentTreeError
        If the content directory is missing or its root ``_index.md`` is
        missing or invalid.
    """
    content_dir = config.content_dir
    if not content_dir.is_dir():
        raise ContentTreeError(content_dir, "content directory not found")

    sections: dict[Path, Section] = {}
    pages: list[Page] = []
    errors: list[PagetreeError] = []
    for file_path in sorted(content_dir.rglob(f"*{CONTENT_SUFFIX}")):
        if not file_path.is_file():
            continue
        try:
            if file_path.name == SECTION_INDEX_FILENAME:
                section = Section.from_file(file_path, config)
                sections[section.parent_path] = section
            else:
                pages.append(Page.from_file(file_path, config))
        except (FileReadError, FrontMatterParseError) as exc:
            logger.warning("Skipping %s", exc)
            errors.append(exc)

    root = sections.get(content_dir)
    if root is None:
        root_index = content_dir / SECTION_INDEX_FILENAME
        cause = next((err for err in errors if err.path == root_index), None)
        if cause is None:
            raise ContentTreeError(root_index, "root section index is missing")
        reason = f"root section index is invalid: {cause.reason}"
        raise ContentTreeError(root_index, reason) from cause

    pages_by_dir: dict[Path, list[Page]] = collections.defaultdict(list)
    for page in pages:
        pages_by_dir[page.parent_path].append(page)
    for directory, section in sections.items():
        section.pages, section.ignored_pages = sort_pages(
            pages_by_dir.get(directory, []), section.meta.sort_by
        )

    for section in sorted(
        sections.values(), key=lambda item: (-len(item.components), item.relative_path)
    ):
        if section is root:
            continue
        parent = _nearest_parent(section, sections, root)
        parent.subsections.append(section)
    for section in sections.values():
        section.subsections.sort(key=lambda item: item.relative_path)

    tree = ContentTree(
        root=root,
        config=config,
        page_files=[page.file_path for page in pages],
        errors=errors,
    )
    for orphan in tree.orphan_pages():
        logger.warning("Page %s is not inside any section", orphan)
    return tree


def _nearest_parent(
    section: Section, sections: dict[Path, Section], root: Section
) -> Section:
    """Return the closest ancestor section of ``section``, or ``root``."""
    directory = section.parent_path.parent
    while directory != root.parent_path and directory != directory.parent:
        candidate = sections.get(directory)
        if candidate is not None:
            return candidate
        directory = directory.parent
    return root


__all__ = ["ContentTree", "load_content_tree"]
