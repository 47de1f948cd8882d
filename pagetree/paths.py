"""Derive logical identities for content files from their filesystem location.

A document's position in the content tree is the ordered list of directory
names between the content root and the document itself. Those *components*
drive the URL path, the relative path, and ultimately the permalink.

Examples
--------
>>> from pathlib import Path
>>> find_content_components(Path("content/blog/tech/_index.md"), Path("content"))
['blog', 'tech']
>>> find_content_components(Path("content/_index.md"), Path("content"))
[]
>>> components_to_path(["blog", "tech"])
'blog/tech'
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .errors import FileReadError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

CONTENT_DIR_NAME = "content"


def find_content_components(file_path: Path, content_dir: Path) -> list[str]:
    """Return the folder names between ``content_dir`` and ``file_path``.

    The file name itself is never part of the result, so the content root's
    own index document yields an empty list. Segment casing and ordering are
    preserved as found on disk.

    When ``file_path`` does not sit under ``content_dir`` the segments after
    the last directory literally named ``content`` are used instead.
    """
    try:
        relative = file_path.relative_to(content_dir)
    except ValueError:
        parts = file_path.parts
        if CONTENT_DIR_NAME not in parts[:-1]:
            return []
        anchor = len(parts) - 1 - parts[::-1].index(CONTENT_DIR_NAME)
        return list(parts[anchor + 1 : -1])
    return list(relative.parts[:-1])


def components_to_path(components: cabc.Sequence[str]) -> str:
    """Join components into the slash-separated logical path."""
    return "/".join(components)


def read_file(path: Path) -> str:
    """Read a UTF-8 content file, dropping a leading BOM and tagging failures.

    Raises
    ------
    FileReadError
        If the file is missing, unreadable, or not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(path, str(exc)) from exc


__all__ = ["components_to_path", "find_content_components", "read_file"]
