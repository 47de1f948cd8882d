"""Thin wrapper around the Jinja environment used to render content."""

from __future__ import annotations

import typing as typ

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


class TemplateEngine:
    """Render named templates from a directory with a context mapping."""

    def __init__(self, templates_dir: Path) -> None:
        """Initialize the Jinja environment rooted at ``templates_dir``.

        Parameters
        ----------
        templates_dir : Path
            Directory containing the Jinja templates. Undefined variables
            raise instead of rendering as empty strings so that a template
            referring to a missing field fails loudly.
        """
        self.templates_dir = templates_dir
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def render(self, template_name: str, context: cabc.Mapping[str, typ.Any]) -> str:
        """Render ``template_name`` with ``context``.

        Raises
        ------
        jinja2.TemplateError
            If the template is missing, malformed, or references an undefined
            value.
        """
        template = self.env.get_template(template_name)
        return template.render(**context)


__all__ = ["TemplateEngine"]
