"""Cyclopts CLI entrypoint for inspecting and rendering a pagetree site.

The ``pagetree`` console script loads ``site.yaml``, assembles the section
tree from the content directory, and then either renders a section to stdout,
dumps the template-facing tree as JSON, or checks the content for broken
documents and orphaned pages. Every option can also be supplied through a
``PAGETREE_``-prefixed environment variable.

Examples
--------
Render the blog section with the default configuration:

>>> from pagetree.cli import app
>>> app(["render", "--section", "blog"])  # doctest: +SKIP

Fail a CI job when any document is broken:

>>> app(["check", "--config", "site.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
import msgspec.json
from cyclopts import App, Parameter

from .config import load_site_config
from .content import ContentTree, load_content_tree
from .templating import TemplateEngine

DEFAULT_CONFIG = Path("site.yaml")

app = App(name="pagetree", config=cyclopts.config.Env("PAGETREE_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to site config", env_var="PAGETREE_CONFIG")
]
VerboseOption = typ.Annotated[bool, Parameter(help="Log debug output to stderr")]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_tree(config: Path) -> ContentTree:
    """Load the site configuration and assemble its content tree."""
    return load_content_tree(load_site_config(config))


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render one section through its template and print the HTML.")
def render(
    *,
    section: typ.Annotated[
        str, Parameter(help="Logical path of the section, e.g. blog/tech")
    ] = "",
    config: ConfigOption = DEFAULT_CONFIG,
    verbose: VerboseOption = False,
) -> None:
    """Render a single section and write the HTML to stdout.

    Parameters
    ----------
    section : str, optional
        Logical path of the section to render; the root section by default.
    config : Path, optional
        Path to the ``site.yaml`` configuration file.
    verbose : bool, optional
        Emit debug logging.

    Raises
    ------
    KeyError
        If no section has the requested path.
    TemplateRenderError
        If the template engine fails.
    """
    _configure_logging(verbose)
    tree = _load_tree(config)
    engine = TemplateEngine(tree.config.templates_dir)
    print(tree.render_section(section, engine))


@app.command(help="Print the template-facing section tree as JSON.")
def tree(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    verbose: VerboseOption = False,
) -> None:
    """Dump the public view of the root section, recursively, as JSON."""
    _configure_logging(verbose)
    content = _load_tree(config)
    encoded = msgspec.json.encode(content.root.to_view())
    print(msgspec.json.format(encoded, indent=2).decode("utf-8"))


@app.command(help="Report broken documents and pages outside any section.")
def check(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    verbose: VerboseOption = False,
) -> None:
    """Report per-document failures and orphaned pages.

    Raises
    ------
    SystemExit
        With status 1 when any document failed to load.
    """
    _configure_logging(verbose)
    content = _load_tree(config)
    for error in content.errors:
        print(f"error [{error.stage}] {_format_path(error.path)}: {error.reason}")
    for orphan in content.orphan_pages():
        print(f"orphan {_format_path(orphan)}")
    sections = sum(1 for _ in content.sections())
    print(f"{sections} sections, {len(content.page_files)} pages")
    if content.errors:
        raise SystemExit(1)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``pagetree`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
