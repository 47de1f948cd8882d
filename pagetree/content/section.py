"""Section entities: one directory's ``_index.md`` plus the content it owns.

A section derives its whole identity (components, path, relative path and
permalink) from where its index file lives under the content root. Sections
own their pages and subsections outright and never point back at their
parent, so the tree is navigated top-down only.

Example
-------
>>> from pathlib import Path
>>> from pagetree.config import SiteConfig
>>> config = SiteConfig(base_url="https://example.com", content_dir=Path("/site/content"))
>>> section = Section.parse(
...     Path("/site/content/blog/tech/_index.md"), "---\\ntitle: Tech\\n---\\n", config
... )
>>> section.path, section.relative_path, section.permalink
('blog/tech', 'blog/tech/_index.md', 'https://example.com/blog/tech/')
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from pagetree._constants import (
    DEFAULT_INDEX_TEMPLATE,
    DEFAULT_SECTION_TEMPLATE,
    SECTION_INDEX_FILENAME,
)
from pagetree.errors import TemplateRenderError
from pagetree.front_matter import FrontMatter, split_content
from pagetree.paths import components_to_path, find_content_components, read_file

from .views import SectionView, section_view

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from pagetree.config import SiteConfig
    from pagetree.templating import TemplateEngine

    from .page import Page

logger = logging.getLogger(__name__)


def resolve_template_name(
    meta: FrontMatter,
    *,
    is_index: bool,
    index_template: str = DEFAULT_INDEX_TEMPLATE,
    section_template: str = DEFAULT_SECTION_TEMPLATE,
) -> str:
    """Pick the template governing a section.

    An explicit ``template`` in front matter always wins; otherwise the root
    section uses ``index_template`` and every other section uses
    ``section_template``.

    Examples
    --------
    >>> resolve_template_name(FrontMatter(), is_index=True)
    'index.html'
    >>> resolve_template_name(FrontMatter(template="custom.html"), is_index=True)
    'custom.html'
    """
    if meta.template is not None:
        return meta.template
    if is_index:
        return index_template
    return section_template


@dc.dataclass(slots=True)
class Section:
    """An addressable index document and the content directly beneath it.

    Attributes
    ----------
    file_path : Path
        Absolute location of the ``_index.md`` file.
    meta : FrontMatter
        Parsed front matter of the index file.
    components : list[str]
        Folder names from the content root to this section; empty for root.
    permalink : str
        Absolute URL computed by the site configuration.
    pages : list[Page]
        Child pages that sorted successfully, in display order.
    ignored_pages : list[Page]
        Child pages excluded from ``pages`` by the sorting rules.
    subsections : list[Section]
        Child sections, owned by this section.
    """

    file_path: Path
    meta: FrontMatter
    components: list[str] = dc.field(default_factory=list)
    permalink: str = ""
    pages: list[Page] = dc.field(default_factory=list)
    ignored_pages: list[Page] = dc.field(default_factory=list)
    subsections: list[Section] = dc.field(default_factory=list)

    @classmethod
    def parse(cls, file_path: Path, content: str, config: SiteConfig) -> Section:
        """Build a section from the raw ``content`` of its index file.

        Only the front matter is retained; the body is left to the renderer
        of the index document.

        Raises
        ------
        FrontMatterParseError
            If the front matter of ``file_path`` is missing or invalid.
        """
        meta, _body = split_content(file_path, content)
        section = cls(file_path=file_path, meta=meta)
        section.components = find_content_components(file_path, config.content_dir)
        section.permalink = config.make_permalink(section.path)
        logger.debug("Parsed section %s as /%s", file_path, section.path)
        return section

    @classmethod
    def from_file(cls, path: Path, config: SiteConfig) -> Section:
        """Read ``path`` from disk and parse it into a section.

        Raises
        ------
        FileReadError
            If ``path`` cannot be read.
        FrontMatterParseError
            If the file was read but its front matter is invalid.
        """
        return cls.parse(path, read_file(path), config)

    @property
    def parent_path(self) -> Path:
        """Directory containing the index file."""
        return self.file_path.parent

    @property
    def path(self) -> str:
        """Logical URL path, without scheme or leading slash."""
        return components_to_path(self.components)

    @property
    def relative_path(self) -> str:
        """Index file path relative to the content root."""
        if not self.components:
            return SECTION_INDEX_FILENAME
        return f"{self.path}/{SECTION_INDEX_FILENAME}"

    def is_index(self) -> bool:
        """Return True for the root section of the content tree."""
        return not self.components

    def get_template_name(self, config: SiteConfig | None = None) -> str:
        """Return the template name, honouring ``config`` defaults if given."""
        if config is None:
            return resolve_template_name(self.meta, is_index=self.is_index())
        return resolve_template_name(
            self.meta,
            is_index=self.is_index(),
            index_template=config.index_template,
            section_template=config.section_template,
        )

    def build_context(
        self, sections: cabc.Sequence[Section], config: SiteConfig
    ) -> dict[str, typ.Any]:
        """Assemble the variables handed to the section template.

        ``sections`` lists the top-level sections and is only exposed when
        this is the root section.
        """
        context: dict[str, typ.Any] = {
            "config": config,
            "section": self.to_view(),
            "current_url": self.permalink,
            "current_path": self.path,
        }
        if self.is_index():
            context["sections"] = [section.to_view() for section in sections]
        return context

    def render_html(
        self,
        sections: cabc.Sequence[Section],
        engine: TemplateEngine,
        config: SiteConfig,
    ) -> str:
        """Render this section with its resolved template.

        Raises
        ------
        TemplateRenderError
            If the engine fails for any reason; the underlying error is chained.
        """
        template_name = self.get_template_name(config)
        context = self.build_context(sections, config)
        logger.debug("Rendering section %s with %s", self.file_path, template_name)
        try:
            return engine.render(template_name, context)
        except Exception as exc:  # noqa: BLE001
            reason = f"failed to render section with '{template_name}': {exc}"
            raise TemplateRenderError(self.file_path, reason) from exc

    def all_pages_path(self) -> list[Path]:
        """Return the files of ``pages`` and ``ignored_pages``, deduplicated."""
        paths = [page.file_path for page in self.pages]
        paths.extend(page.file_path for page in self.ignored_pages)
        return list(dict.fromkeys(paths))

    def to_view(self) -> SectionView:
        """Return the template-facing representation of this section."""
        return section_view(self)


__all__ = ["Section", "resolve_template_name"]
