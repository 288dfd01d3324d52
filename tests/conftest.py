"""Shared fixtures for the lcp_pages test suite."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import pytest

from lcp_pages.config import (
    FooterColumn,
    FooterConfig,
    LinkItem,
    NavbarConfig,
    SiteConfig,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

REPO_ROOT = Path(__file__).resolve().parents[1]

SPEC_DOC_IDS = frozenset(
    {
        "intro",
        "introduction",
        "architecture",
        "core-components",
        "discovery",
        "negotiation",
        "verification",
        "settlement",
        "trust-model",
        "extensions",
    }
)


@pytest.fixture
def known_ids() -> frozenset[str]:
    """Return the document IDs of the protocol specification corpus."""
    return SPEC_DOC_IDS


@pytest.fixture
def make_site_config() -> cabc.Callable[..., SiteConfig]:
    """Return a factory for minimal valid site configs with field overrides."""

    def _factory(**overrides: typ.Any) -> SiteConfig:
        base = SiteConfig(
            title="Liquid Context Protocol",
            tagline="Open protocol specification",
            site_url="https://turf-tech.github.io",
            base_url="/lcp-spec/",
            organization_name="Turf-Tech",
            project_name="lcp-spec",
            navbar=NavbarConfig(
                items=(
                    LinkItem(
                        label="Documentation", sidebar="docsSidebar", position="left"
                    ),
                    LinkItem(
                        label="GitHub",
                        href="https://github.com/Turf-Tech/lcp-spec",
                        position="right",
                    ),
                )
            ),
            footer=FooterConfig(
                columns=(
                    FooterColumn(
                        title="Documentation",
                        items=(LinkItem(label="Introduction", to="/docs/intro"),),
                    ),
                )
            ),
        )
        return dc.replace(base, **overrides)

    return _factory


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create a docs corpus holding every specification document."""
    root = tmp_path / "docs"
    root.mkdir()
    for doc_id in sorted(SPEC_DOC_IDS):
        (root / f"{doc_id}.md").write_text(f"# {doc_id}\n", encoding="utf-8")
    return root
