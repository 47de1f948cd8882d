"""Exception types raised while loading and rendering content documents.

Every error carries the path of the originating document and the stage that
failed, so the hosting pipeline can report precisely which file broke and
whether it happened while reading, parsing front matter, or rendering. The
underlying cause is always chained with ``raise ... from exc``.

Examples
--------
>>> from pathlib import Path
>>> err = FileReadError(Path("content/blog/_index.md"), "file not found")
>>> err.stage
'read'
>>> str(err)
'[read] content/blog/_index.md: file not found'
"""

from __future__ import annotations

from pathlib import Path


class PagetreeError(Exception):
    """Base class for document-level failures tagged with a file path.

    Attributes
    ----------
    path : Path
        Document that triggered the failure.
    reason : str
        Human-readable description of what went wrong.
    """

    stage = "content"

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"[{self.stage}] {self.path}: {reason}")


class FileReadError(PagetreeError):
    """Raised when a content file is missing or cannot be decoded."""

    stage = "read"


class FrontMatterParseError(PagetreeError):
    """Raised when a document's front-matter block is absent or malformed."""

    stage = "front-matter"


class TemplateRenderError(PagetreeError):
    """Raised when the template engine fails to render a document."""

    stage = "render"


class ContentTreeError(PagetreeError):
    """Raised when the content directory cannot form a section tree."""

    stage = "tree"


__all__ = [
    "ContentTreeError",
    "FileReadError",
    "FrontMatterParseError",
    "PagetreeError",
    "TemplateRenderError",
]
