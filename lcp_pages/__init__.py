"""Validate and assemble the Liquid Context Protocol documentation site config.

This package checks the declarative site configuration (metadata, locales,
navbar and footer links) and the sidebar navigation trees against the docs
corpus, then hands the validated pair to the site renderer as a JSON manifest.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from lcp_pages import main
>>> main()  # doctest: +SKIP
>>> from lcp_pages import app
>>> app(["check", "--docs-dir", "website/docs"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
