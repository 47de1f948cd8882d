"""Load and validate site configuration YAML for pagetree builds.

This subpackage parses the project's ``site.yaml`` file and produces a
:class:`SiteConfig` dataclass that the content model consumes. The config owns
permalink construction (:meth:`SiteConfig.make_permalink`), the default
template names, and the content/template directories.

Examples
--------
>>> from pathlib import Path
>>> from pagetree.config import load_site_config
>>> site = load_site_config(Path("site.yaml"))  # doctest: +SKIP
>>> site.make_permalink("blog/tech")  # doctest: +SKIP
'https://example.com/blog/tech/'
"""

from .loader import load_site_config
from .models import PACKAGE_TEMPLATES_DIR, SiteConfig, SiteConfigError

__all__ = [
    "PACKAGE_TEMPLATES_DIR",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
