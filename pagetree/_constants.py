"""Common literal values used across pagetree.

These constants keep filenames and default template names centralized so the
content model, the tree loader, and tests can import the same values without
drifting. Intended for internal use within the pagetree package.

Examples
--------
>>> from pagetree import _constants
>>> _constants.SECTION_INDEX_FILENAME
'_index.md'
>>> _constants.DEFAULT_SECTION_TEMPLATE.endswith('.html')
True
"""

SECTION_INDEX_FILENAME = "_index.md"
CONTENT_SUFFIX = ".md"
DEFAULT_INDEX_TEMPLATE = "index.html"
DEFAULT_SECTION_TEMPLATE = "section.html"
SORT_BY_CHOICES = ("date", "order", "none")
