"""Content model for a Jinja-driven static site generator.

This package turns a directory of markdown files into a tree of sections and
pages whose identity (path, relative path, permalink) comes purely from their
location under the content root, and renders sections through Jinja
templates.

Exports
-------
- ``Section`` and ``Page``: the content entities.
- ``load_content_tree``: assemble a :class:`ContentTree` from a config.
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from pagetree import Section
>>> Section.__name__
'Section'
>>> from pagetree import main
>>> callable(main)
True
"""

from __future__ import annotations

from .cli import app, main
from .content import ContentTree, Page, Section, load_content_tree

__all__ = ["ContentTree", "Page", "Section", "app", "load_content_tree", "main"]
