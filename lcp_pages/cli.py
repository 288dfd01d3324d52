"""Cyclopts CLI entrypoint for checking the documentation site configuration.

The ``lcp-pages`` console script validates ``site.yaml`` and ``sidebars.yaml``
against the markdown docs corpus before the site renderer runs, and can write
the JSON site manifest the renderer consumes. Typical usage is running
``lcp-pages check`` in CI and ``lcp-pages manifest`` as the first build step.
Any configuration error halts with a non-zero exit status and a message naming
the offending field or sidebar node.

Examples
--------
Validate the default configuration:

>>> from lcp_pages.cli import main
>>> main()  # doctest: +SKIP

Write the manifest to a custom location:

>>> from lcp_pages.cli import app
>>> app(["manifest", "--output", "dist/site.json"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import (
    DEFAULT_CONFIG,
    DEFAULT_DOCS_DIR,
    DEFAULT_MANIFEST,
    DEFAULT_SIDEBARS,
)
from .config import load_site_config
from .config.helpers import load_yaml_mapping
from .corpus import discover_corpus
from .errors import SiteConfigError
from .site import SiteBuild, assemble_site, write_manifest

app = App(name="lcp-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
]
SidebarsOption = typ.Annotated[
    Path, Parameter(help="Path to sidebars config", env_var="INPUT_SIDEBARS")
]
DocsDirOption = typ.Annotated[
    Path, Parameter(help="Markdown docs directory", env_var="INPUT_DOCS_DIR")
]
KnownIdOption = typ.Annotated[
    list[str] | None,
    Parameter(help="Known document ID; skips docs directory discovery"),
]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _assemble(
    config: Path, sidebars: Path, docs_dir: Path, known_id: list[str] | None
) -> SiteBuild:
    """Load every input and assemble the site, exiting on configuration errors."""
    try:
        site_config = load_site_config(config)
        if known_id:
            known_ids: frozenset[str] = frozenset(known_id)
            sources: dict[str, str] = {}
        else:
            corpus = discover_corpus(docs_dir)
            known_ids = corpus.ids
            sources = corpus.sources
        sidebars_raw = load_yaml_mapping(sidebars)
        build = assemble_site(
            site_config,
            sidebars_raw,
            known_ids=known_ids,
            sources=sources,
            sidebars_location=str(sidebars),
        )
    except (SiteConfigError, FileNotFoundError, TypeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    for warning in build.warnings:
        print(f"warning: {warning}", file=sys.stderr)
    return build


@app.command(help="Validate the site config and sidebars against the docs.")
def check(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    sidebars: SidebarsOption = DEFAULT_SIDEBARS,
    docs_dir: DocsDirOption = DEFAULT_DOCS_DIR,
    known_id: KnownIdOption = None,
) -> None:
    """Validate the configuration and report the navigation size.

    Parameters
    ----------
    config : Path, optional
        Path to ``site.yaml`` (overridable via ``INPUT_CONFIG``).
    sidebars : Path, optional
        Path to ``sidebars.yaml`` (overridable via ``INPUT_SIDEBARS``).
    docs_dir : Path, optional
        Markdown corpus used to discover document IDs.
    known_id : list[str] or None, optional
        Explicit document IDs; when given, ``docs_dir`` is not scanned.

    Raises
    ------
    SystemExit
        With status 1 when any configuration error is detected.
    """
    build = _assemble(config, sidebars, docs_dir, known_id)
    print(f"ok: {build.page_count} pages across {len(build.sidebars)} sidebars")


@app.command(help="Validate the configuration and write the site manifest.")
def manifest(
    *,
    config: ConfigOption = DEFAULT_CONFIG,
    sidebars: SidebarsOption = DEFAULT_SIDEBARS,
    docs_dir: DocsDirOption = DEFAULT_DOCS_DIR,
    known_id: KnownIdOption = None,
    output: typ.Annotated[
        Path, Parameter(help="Manifest output path", env_var="INPUT_OUTPUT")
    ] = DEFAULT_MANIFEST,
) -> None:
    """Write the JSON manifest handed to the site renderer."""
    build = _assemble(config, sidebars, docs_dir, known_id)
    written = write_manifest(build, output)
    print(f"wrote {_format_path(written)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``lcp-pages`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
