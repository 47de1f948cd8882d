"""Section and page entities plus the loader that assembles them into a tree."""

from .page import Page
from .section import Section, resolve_template_name
from .sorting import sort_pages
from .tree import ContentTree, load_content_tree
from .views import PageView, SectionView, page_view, section_view

__all__ = [
    "ContentTree",
    "Page",
    "PageView",
    "Section",
    "SectionView",
    "load_content_tree",
    "page_view",
    "resolve_template_name",
    "section_view",
    "sort_pages",
]
