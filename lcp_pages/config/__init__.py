"""Load and validate the documentation site configuration.

This subpackage parses the project's ``site.yaml`` file (a YAML rendition of
the Docusaurus site config), turns the navbar and footer link collections into
typed dataclasses, and checks the site invariants before anything is handed to
the renderer. The primary entry point is :func:`load_site_config`; configs
built in code go through :func:`validate_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from lcp_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.doc_url("intro")  # doctest: +SKIP
'https://turf-tech.github.io/lcp-spec/docs/intro'
"""

from ..errors import SiteConfigError
from .loader import build_site_config, load_site_config
from .models import (
    ExternalLink,
    FooterColumn,
    FooterConfig,
    I18nConfig,
    InternalDoc,
    LinkItem,
    LinkTarget,
    NavbarConfig,
    SidebarRef,
    SiteConfig,
)
from .validator import is_absolute_url, validate_site_config

__all__ = [
    "ExternalLink",
    "FooterColumn",
    "FooterConfig",
    "I18nConfig",
    "InternalDoc",
    "LinkItem",
    "LinkTarget",
    "NavbarConfig",
    "SidebarRef",
    "SiteConfig",
    "SiteConfigError",
    "build_site_config",
    "is_absolute_url",
    "load_site_config",
    "validate_site_config",
]
