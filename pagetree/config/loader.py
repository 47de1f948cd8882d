"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from pagetree._constants import DEFAULT_INDEX_TEMPLATE, DEFAULT_SECTION_TEMPLATE

from .helpers import (
    _coerce_bool,
    _coerce_mapping,
    _optional_str,
    _require_str,
    _resolve_dir,
)
from .models import PACKAGE_TEMPLATES_DIR, SiteConfig


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with ``content_dir`` and ``templates_dir``
        resolved against the directory holding ``path``.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If ``base_url`` is missing or a field has the wrong type.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from pagetree.config import load_site_config
    >>> config = load_site_config(Path("site.yaml"))  # doctest: +SKIP
    >>> config.make_permalink("blog")  # doctest: +SKIP
    'https://example.com/blog/'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base = path.resolve().parent

    return SiteConfig(
        base_url=_require_str(raw, "base_url"),
        title=_optional_str(raw.get("title")),
        description=_optional_str(raw.get("description")),
        content_dir=_resolve_dir(
            raw.get("content_dir"), base=base, default=base / "content"
        ),
        templates_dir=_resolve_dir(
            raw.get("templates_dir"), base=base, default=PACKAGE_TEMPLATES_DIR
        ),
        index_template=_optional_str(raw.get("index_template"))
        or DEFAULT_INDEX_TEMPLATE,
        section_template=_optional_str(raw.get("section_template"))
        or DEFAULT_SECTION_TEMPLATE,
        trailing_slash=_coerce_bool(
            raw.get("trailing_slash"), key="trailing_slash", default=True
        ),
        extra=_coerce_mapping(raw.get("extra"), key="extra"),
    )


__all__ = ["load_site_config"]
