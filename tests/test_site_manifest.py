"""Tests for site assembly, link resolution and the JSON site manifest.

These tests load the checked-in ``config/site.yaml`` and ``sidebars.yaml``,
assemble them against an in-memory corpus of the protocol specification
documents, and decode the written manifest with ``msgspec`` to check what the
renderer receives.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import msgspec.json as msgspec_json
import pytest

from lcp_pages.config import FooterColumn, FooterConfig, LinkItem, load_site_config
from lcp_pages.config.helpers import load_yaml_mapping
from lcp_pages.errors import AmbiguousLinkTargetError, UnresolvedDocIdError
from lcp_pages.site import assemble_site, doc_id_for_path, write_manifest

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from lcp_pages.config import SiteConfig

REPO_ROOT = Path(__file__).resolve().parents[1]
SIDEBARS = {"docsSidebar": ["intro", {"label": "Spec", "items": ["architecture"]}]}


def _footer_link(**kwargs: str) -> FooterConfig:
    return FooterConfig(
        columns=(FooterColumn(title="Docs", items=(LinkItem(label="L", **kwargs),)),)
    )


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/docs/intro", "intro"),
        ("/docs/intro/", "intro"),
        ("/docs/layers/discovery#scope", "layers/discovery"),
        ("intro?ref=nav", "intro"),
        ("/docs", ""),
        ("/docsite/intro", "docsite/intro"),
    ],
)
def test_doc_id_for_path(path: str, expected: str) -> None:
    assert doc_id_for_path(path, route_base="docs") == expected


def test_repository_config_assembles(known_ids: frozenset[str]) -> None:
    """The checked-in site config and sidebars are consistent."""
    config = load_site_config(REPO_ROOT / "config" / "site.yaml")
    sidebars_raw = load_yaml_mapping(REPO_ROOT / "config" / "sidebars.yaml")
    build = assemble_site(config, sidebars_raw, known_ids=known_ids)
    assert build.page_count == 10
    assert build.warnings == ()
    assert config.navbar.items[0].sidebar == "docsSidebar"
    assert "navbar" not in config.theme_config
    assert config.theme_config["tableOfContents"]["maxHeadingLevel"] == 4


def test_unresolved_footer_link_throws(
    make_site_config: cabc.Callable[..., SiteConfig], known_ids: frozenset[str]
) -> None:
    config = make_site_config(footer=_footer_link(to="/docs/roadmap"))
    with pytest.raises(UnresolvedDocIdError) as excinfo:
        assemble_site(config, SIDEBARS, known_ids=known_ids)
    assert excinfo.value.doc_id == "roadmap"
    assert excinfo.value.location == "footer.columns[0].items[0]"


def test_unknown_sidebar_reference_throws(
    make_site_config: cabc.Callable[..., SiteConfig], known_ids: frozenset[str]
) -> None:
    config = make_site_config(footer=_footer_link(sidebar="apiSidebar"))
    with pytest.raises(UnresolvedDocIdError, match="Unknown sidebar 'apiSidebar'"):
        assemble_site(config, SIDEBARS, known_ids=known_ids)


@pytest.mark.parametrize(("policy", "expected"), [("warn", 1), ("log", 1), ("ignore", 0)])
def test_lenient_policies_collect_warnings(
    make_site_config: cabc.Callable[..., SiteConfig],
    known_ids: frozenset[str],
    policy: str,
    expected: int,
) -> None:
    config = make_site_config(
        footer=_footer_link(to="/docs/roadmap"), on_broken_links=policy
    )
    build = assemble_site(config, SIDEBARS, known_ids=known_ids)
    assert len(build.warnings) == expected


def test_sidebar_ids_are_checked_regardless_of_policy(
    make_site_config: cabc.Callable[..., SiteConfig], known_ids: frozenset[str]
) -> None:
    config = make_site_config(on_broken_links="ignore")
    with pytest.raises(UnresolvedDocIdError):
        assemble_site(config, {"docsSidebar": ["missing"]}, known_ids=known_ids)


def test_config_is_validated_before_sidebars(
    make_site_config: cabc.Callable[..., SiteConfig],
) -> None:
    config = make_site_config(
        footer=_footer_link(to="intro", href="https://example.com")
    )
    with pytest.raises(AmbiguousLinkTargetError):
        assemble_site(config, {"docsSidebar": ["missing"]}, known_ids=set())


def test_manifest_describes_pages_and_links(
    make_site_config: cabc.Callable[..., SiteConfig],
    known_ids: frozenset[str],
    tmp_path: Path,
) -> None:
    """The manifest exposes resolved links and previous/next navigation."""
    config = dc.replace(make_site_config(), presets={"classic": {"blog": False}})
    build = assemble_site(
        config,
        SIDEBARS,
        known_ids=known_ids,
        sources={"architecture": "02-architecture.md"},
    )
    path = write_manifest(build, tmp_path / "build" / "site-manifest.json")
    manifest = msgspec_json.decode(path.read_bytes())

    assert manifest["site"]["repositoryUrl"] == "https://github.com/Turf-Tech/lcp-spec"
    assert manifest["site"]["i18n"] == {"defaultLocale": "en", "locales": ["en"]}
    assert manifest["presets"] == {"classic": {"blog": False}}

    navbar = manifest["navbar"]["items"]
    assert navbar[0] == {
        "label": "Documentation",
        "position": "left",
        "sidebarId": "docsSidebar",
        "to": "/lcp-spec/docs/intro",
    }
    assert navbar[1]["href"] == "https://github.com/Turf-Tech/lcp-spec"
    footer_item = manifest["footer"]["links"][0]["items"][0]
    assert footer_item == {
        "label": "Introduction",
        "to": "/lcp-spec/docs/intro",
        "docId": "intro",
    }

    sidebar = manifest["sidebars"]["docsSidebar"]
    assert sidebar["items"][1] == {
        "type": "category",
        "label": "Spec",
        "collapsed": True,
        "items": [{"type": "doc", "id": "architecture", "label": None}],
    }
    intro, architecture = sidebar["pages"]
    assert intro["next"] == "architecture"
    assert intro["previous"] is None
    assert intro["url"] == "https://turf-tech.github.io/lcp-spec/docs/intro"
    assert intro["editUrl"].endswith("/tree/main/website/docs/intro.md")
    assert architecture["previous"] == "intro"
    assert architecture["breadcrumbs"] == ["Spec"]
    assert architecture["editUrl"].endswith("/docs/02-architecture.md")
