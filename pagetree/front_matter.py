r"""Split content documents into typed front matter and a markdown body.

Documents open with a metadata block fenced either by ``---`` lines (YAML) or
by ``+++`` lines (TOML). Everything after the closing fence is the body, which
this module hands back untouched.

Example
-------
>>> from pathlib import Path
>>> meta, body = split_content(
...     Path("content/blog/_index.md"), "---\ntitle: Blog\n---\nHello"
... )
>>> meta.title, body
('Blog', 'Hello')
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import re
import tomllib
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import SORT_BY_CHOICES
from .errors import FrontMatterParseError

if typ.TYPE_CHECKING:
    from pathlib import Path

FRONT_MATTER_PATTERN = re.compile(
    r"\A\ufeff?\s*(?P<fence>---|\+\+\+)[ \t]*\r?\n"
    r"(?P<meta>.*?)"
    r"^(?P=fence)[ \t]*(?:\r?\n|\Z)"
    r"(?P<body>.*)\Z",
    re.DOTALL | re.MULTILINE,
)
KNOWN_KEYS = frozenset(
    {
        "title",
        "description",
        "template",
        "slug",
        "date",
        "order",
        "draft",
        "sort_by",
        "paginate_by",
    }
)


@dc.dataclass(slots=True)
class FrontMatter:
    """Metadata recognised at the top of a content document.

    Attributes
    ----------
    title : str or None
        Document title.
    description : str or None
        Short summary shown in listings.
    template : str or None
        Template overriding the positional default.
    slug : str or None
        URL segment overriding the file stem (pages only).
    date : date or datetime or None
        Publication date used when a section sorts by date.
    order : int or None
        Explicit position used when a section sorts by order.
    draft : bool
        Drafts never appear in a section's sorted pages.
    sort_by : str
        One of ``"date"``, ``"order"`` or ``"none"``.
    paginate_by : int or None
        Page size hint read by the host pipeline; not part of the section view.
    extra : dict[str, Any]
        Any keys not listed above.
    """

    title: str | None = None
    description: str | None = None
    template: str | None = None
    slug: str | None = None
    date: dt.date | dt.datetime | None = None
    order: int | None = None
    draft: bool = False
    sort_by: str = "none"
    paginate_by: int | None = None
    extra: dict[str, typ.Any] = dc.field(default_factory=dict)


def split_content(file_path: Path, content: str) -> tuple[FrontMatter, str]:
    """Return the parsed front matter and the remaining body of ``content``.

    Raises
    ------
    FrontMatterParseError
        If no front-matter block is present, the block does not parse, or a
        recognised key holds a value of the wrong type.
    """
    match = FRONT_MATTER_PATTERN.match(content)
    if match is None:
        reason = "couldn't find front matter; did you forget to add `---`?"
        raise FrontMatterParseError(file_path, reason)

    raw_meta = match.group("meta")
    if match.group("fence") == "+++":
        payload = _load_toml(file_path, raw_meta)
    else:
        payload = _load_yaml(file_path, raw_meta)
    return parse_front_matter(file_path, payload), match.group("body")


def _load_yaml(file_path: Path, text: str) -> object:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        return loader.load(text)
    except (YAMLError, ValueError) as exc:
        raise FrontMatterParseError(file_path, f"invalid YAML: {exc}") from exc


def _load_toml(file_path: Path, text: str) -> object:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise FrontMatterParseError(file_path, f"invalid TOML: {exc}") from exc


def parse_front_matter(file_path: Path, payload: object) -> FrontMatter:
    """Validate a decoded metadata mapping into a :class:`FrontMatter`."""
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        reason = f"front matter must be a mapping, got {type(payload).__name__}"
        raise FrontMatterParseError(file_path, reason)

    def fail(key: str, expected: str) -> typ.NoReturn:
        reason = f"`{key}` must be {expected}, got {payload[key]!r}"
        raise FrontMatterParseError(file_path, reason)

    meta = FrontMatter(
        extra={key: value for key, value in payload.items() if key not in KNOWN_KEYS}
    )
    for key in ("title", "description", "template", "slug"):
        value = payload.get(key)
        if value is not None and not isinstance(value, str):
            fail(key, "a string")
        setattr(meta, key, value)
    if meta.slug is not None and not meta.slug.strip():
        raise FrontMatterParseError(file_path, "`slug` can't be empty")

    order = payload.get("order")
    if order is not None and (isinstance(order, bool) or not isinstance(order, int)):
        fail("order", "an integer")
    meta.order = order

    paginate_by = payload.get("paginate_by")
    if paginate_by is not None and (
        isinstance(paginate_by, bool)
        or not isinstance(paginate_by, int)
        or paginate_by < 1
    ):
        fail("paginate_by", "a positive integer")
    meta.paginate_by = paginate_by

    draft = payload.get("draft", False)
    if not isinstance(draft, bool):
        fail("draft", "true or false")
    meta.draft = draft

    sort_by = payload.get("sort_by", "none")
    if sort_by not in SORT_BY_CHOICES:
        fail("sort_by", "one of " + ", ".join(SORT_BY_CHOICES))
    meta.sort_by = sort_by

    if "date" in payload and payload["date"] is not None:
        parsed = _parse_date(payload["date"])
        if parsed is None:
            fail("date", "an ISO 8601 date")
        meta.date = parsed
    return meta


def _parse_date(value: object) -> dt.date | dt.datetime | None:
    """Return ``value`` as a date or datetime, or None when unparseable."""
    match value:
        case dt.datetime() | dt.date():
            return value
        case str() as text:
            sanitized = text.strip()
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                if len(sanitized) == len("YYYY-MM-DD"):
                    return dt.date.fromisoformat(sanitized)
                return dt.datetime.fromisoformat(sanitized)
            except ValueError:
                return None
        case _:
            return None


__all__ = ["FrontMatter", "parse_front_matter", "split_content"]
