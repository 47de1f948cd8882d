"""Typed dataclasses describing pagetree site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from pagetree._constants import DEFAULT_INDEX_TEMPLATE, DEFAULT_SECTION_TEMPLATE

PACKAGE_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteConfig:
    """Site-wide settings shared by every section and page.

    Attributes
    ----------
    base_url : str
        Absolute URL the site is served from, e.g. ``https://example.com``.
    title : str or None
        Site title exposed to templates.
    description : str or None
        Site description exposed to templates.
    content_dir : Path
        Root directory holding the markdown content tree.
    templates_dir : Path
        Directory containing the Jinja templates.
    index_template : str
        Template used for the root section when front matter names none.
    section_template : str
        Template used for every other section when front matter names none.
    trailing_slash : bool
        Whether non-root permalinks end with ``/``.
    extra : dict[str, Any]
        Free-form values forwarded to templates untouched.
    """

    base_url: str
    title: str | None = None
    description: str | None = None
    content_dir: Path = Path("content")
    templates_dir: Path = PACKAGE_TEMPLATES_DIR
    index_template: str = DEFAULT_INDEX_TEMPLATE
    section_template: str = DEFAULT_SECTION_TEMPLATE
    trailing_slash: bool = True
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)

    def make_permalink(self, path: str) -> str:
        """Return the absolute URL for a logical content ``path``.

        Examples
        --------
        >>> config = SiteConfig(base_url="https://example.com/")
        >>> config.make_permalink("")
        'https://example.com/'
        >>> config.make_permalink("blog/tech")
        'https://example.com/blog/tech/'
        """
        base = self.base_url.rstrip("/")
        normalized = path.strip("/")
        if not normalized:
            return f"{base}/"
        suffix = "/" if self.trailing_slash else ""
        return f"{base}/{normalized}{suffix}"


__all__ = ["PACKAGE_TEMPLATES_DIR", "SiteConfig", "SiteConfigError"]
