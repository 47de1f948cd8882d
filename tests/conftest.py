"""Shared fixtures for building throwaway content trees on disk."""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent

import pytest

from pagetree.config import SiteConfig

if typ.TYPE_CHECKING:
    import collections.abc as cabc

SAMPLE_SITE: dict[str, str] = {
    "_index.md": """
        ---
        title: Home
        description: Landing page
        ---
        Welcome.
        """,
    "about.md": """
        ---
        title: About
        ---
        About us.
        """,
    "blog/_index.md": """
        ---
        title: Blog
        description: Writing
        sort_by: date
        ---
        """,
    "blog/first.md": """
        ---
        title: First post
        date: 2024-01-05
        ---
        One.
        """,
    "blog/second.md": """
        ---
        title: Second post
        date: 2024-03-01
        ---
        Two.
        """,
    "blog/undated.md": """
        ---
        title: Undated
        ---
        Never sorted.
        """,
    "blog/wip.md": """
        ---
        title: Work in progress
        date: 2024-04-01
        draft: true
        ---
        """,
    "blog/tech/_index.md": """
        +++
        title = "Tech"
        +++
        """,
    "blog/tech/rust.md": """
        ---
        title: Rust
        slug: rust-notes
        ---
        """,
    "docs/_index.md": """
        ---
        title: Docs
        template: docs.html
        sort_by: order
        ---
        """,
    "docs/install.md": """
        ---
        title: Install
        order: 2
        ---
        """,
    "docs/usage.md": """
        ---
        title: Usage
        order: 1
        ---
        """,
    "docs/faq.md": """
        ---
        title: FAQ
        ---
        """,
    "misc/stray.md": """
        ---
        title: Stray
        ---
        """,
}


def write_tree(root: Path, files: cabc.Mapping[str, str]) -> None:
    """Write ``files`` (relative path to dedented text) below ``root``."""
    for relative, text in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(dedent(text).lstrip("\n"), encoding="utf-8")


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Return an empty content directory inside ``tmp_path``."""
    path = tmp_path / "content"
    path.mkdir()
    return path


@pytest.fixture
def site_config(content_dir: Path) -> SiteConfig:
    """Return a configuration rooted at ``content_dir``."""
    return SiteConfig(
        base_url="https://example.com", title="Example", content_dir=content_dir
    )


@pytest.fixture
def sample_site(content_dir: Path, site_config: SiteConfig) -> SiteConfig:
    """Populate ``content_dir`` with :data:`SAMPLE_SITE` and return its config."""
    write_tree(content_dir, SAMPLE_SITE)
    return site_config


@pytest.fixture
def write_files(content_dir: Path) -> cabc.Callable[[cabc.Mapping[str, str]], None]:
    """Return a helper that writes extra files into ``content_dir``."""

    def _write(files: cabc.Mapping[str, str]) -> None:
        write_tree(content_dir, files)

    return _write
