"""Unit tests for splitting and validating document front matter."""

from __future__ import annotations

import datetime as dt
from pathlib import Path

import pytest

from pagetree.errors import FrontMatterParseError
from pagetree.front_matter import FrontMatter, split_content

DOC = Path("content/blog/post.md")


def test_yaml_front_matter_is_split_from_body() -> None:
    """YAML blocks fenced by ``---`` should parse into typed fields."""
    meta, body = split_content(
        DOC,
        "---\ntitle: Post\ndescription: Short\ndate: 2024-02-03\norder: 4\n"
        "author: Ana\n---\nBody text\n",
    )
    assert meta.title == "Post"
    assert meta.description == "Short"
    assert meta.date == dt.date(2024, 2, 3)
    assert meta.order == 4
    assert meta.extra == {"author": "Ana"}, "unknown keys should land in extra"
    assert body == "Body text\n"


def test_toml_front_matter_is_split_from_body() -> None:
    """TOML blocks fenced by ``+++`` should parse the same way."""
    meta, body = split_content(
        DOC, '+++\ntitle = "Post"\ntemplate = "custom.html"\ndraft = true\n+++\nHi'
    )
    assert meta.title == "Post"
    assert meta.template == "custom.html"
    assert meta.draft is True
    assert body == "Hi"


def test_empty_front_matter_uses_defaults() -> None:
    """An empty block is valid and yields default metadata."""
    meta, body = split_content(DOC, "---\n---\n")
    assert meta == FrontMatter()
    assert body == ""


def test_string_dates_are_parsed() -> None:
    """Quoted ISO timestamps should become aware datetimes."""
    meta, _ = split_content(DOC, '---\ndate: "2024-05-06T07:08:09Z"\n---\n')
    assert meta.date == dt.datetime(2024, 5, 6, 7, 8, 9, tzinfo=dt.UTC)


@pytest.mark.parametrize(
    "content",
    [
        "no front matter here",
        "---\ntitle: [unclosed\n---\n",
        '+++\ntitle = "unterminated\n+++\n',
        "---\n- just\n- a list\n---\n",
        "---\ntitle: 12\n---\n",
        "---\norder: first\n---\n",
        "---\norder: true\n---\n",
        "---\ndraft: maybe\n---\n",
        "---\nsort_by: title\n---\n",
        "---\ndate: yesterday\n---\n",
        "---\nslug: '  '\n---\n",
        "---\npaginate_by: 0\n---\n",
    ],
)
def test_malformed_front_matter_is_tagged_with_path(content: str) -> None:
    """Every malformed block should raise an error naming the document."""
    with pytest.raises(FrontMatterParseError) as excinfo:
        split_content(DOC, content)
    assert excinfo.value.path == DOC, (
        f"expected error tagged with {DOC}, got {excinfo.value.path}"
    )
    assert excinfo.value.stage == "front-matter"
    assert str(DOC) in str(excinfo.value)


@pytest.mark.parametrize("value", ["2024-13-45", "2024-02-30", "2023-02-29"])
def test_calendar_invalid_yaml_dates_are_tagged(value: str) -> None:
    """Dates YAML resolves as timestamps but the calendar rejects are tagged."""
    with pytest.raises(FrontMatterParseError) as excinfo:
        split_content(DOC, f"---\ntitle: Post\ndate: {value}\n---\n")
    assert excinfo.value.path == DOC, (
        f"expected error tagged with {DOC}, got {excinfo.value.path}"
    )


def test_leading_byte_order_mark_is_accepted() -> None:
    """A UTF-8 BOM before the opening fence should not hide the front matter."""
    meta, body = split_content(DOC, "\ufeff---\ntitle: X\n---\nBody")
    assert meta.title == "X"
    assert body == "Body"
