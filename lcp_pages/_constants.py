"""Common literal values used across lcp_pages.

These constants keep default paths and accepted option values centralized so
the loader, the CLI, and tests can import the same values without drifting.
Intended for internal use within the lcp_pages package.

Examples
--------
>>> from lcp_pages import _constants
>>> "throw" in _constants.BROKEN_LINK_POLICIES
True
>>> _constants.DEFAULT_MANIFEST.name
'site-manifest.json'
"""

from pathlib import Path

DEFAULT_CONFIG = Path("config/site.yaml")
DEFAULT_SIDEBARS = Path("config/sidebars.yaml")
DEFAULT_DOCS_DIR = Path("docs")
DEFAULT_MANIFEST = Path("build/site-manifest.json")

BROKEN_LINK_POLICIES = frozenset({"ignore", "log", "warn", "throw"})
NAVBAR_POSITIONS = frozenset({"left", "right"})
DOC_SUFFIXES = frozenset({".md", ".mdx"})
