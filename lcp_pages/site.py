"""Assemble the validated site configuration and sidebars for the renderer.

This module ties the layers together: it validates a
:class:`~lcp_pages.config.SiteConfig`, builds every declared sidebar against
the known document IDs, resolves the navbar and footer link targets, and
serialises the result into the JSON site manifest that the rendering
framework reads at build time.

Typical usage mirrors the ``lcp-pages manifest`` command:

>>> from pathlib import Path
>>> from lcp_pages.config import load_site_config
>>> from lcp_pages.corpus import discover_corpus
>>> from lcp_pages.config.helpers import load_yaml_mapping
>>> from lcp_pages.site import assemble_site, write_manifest
>>> corpus = discover_corpus(Path("docs"))  # doctest: +SKIP
>>> build = assemble_site(
...     load_site_config(Path("config/site.yaml")),
...     load_yaml_mapping(Path("config/sidebars.yaml")),
...     known_ids=corpus.ids,
...     sources=corpus.sources,
... )  # doctest: +SKIP
>>> write_manifest(build, Path("build/site-manifest.json"))  # doctest: +SKIP
PosixPath('build/site-manifest.json')

Side effects are limited to :func:`write_manifest`, which creates parent
directories and writes UTF-8 JSON.
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import json
import typing as typ

from .config import ExternalLink, InternalDoc, SidebarRef, validate_site_config
from .errors import UnresolvedDocIdError
from .sidebar import CategoryEntry, build_sidebars

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import LinkItem, SiteConfig
    from .sidebar import SidebarNode, SidebarTree


@dc.dataclass(frozen=True, slots=True)
class SiteBuild:
    """Validated configuration pair handed to the renderer.

    Attributes
    ----------
    config : SiteConfig
        The validated site configuration.
    sidebars : dict[str, SidebarTree]
        Validated sidebars in declaration order.
    warnings : tuple[str, ...]
        Broken internal links tolerated by a ``warn``/``log`` policy.
    sources : Mapping[str, str]
        Docs-relative source file of each document, when known.
    """

    config: SiteConfig
    sidebars: dict[str, SidebarTree]
    warnings: tuple[str, ...] = ()
    sources: cabc.Mapping[str, str] = dc.field(default_factory=dict)

    @property
    def page_count(self) -> int:
        return sum(len(tree.docs) for tree in self.sidebars.values())


def assemble_site(
    config: SiteConfig,
    sidebars_raw: cabc.Mapping[str, typ.Any],
    *,
    known_ids: cabc.Collection[str],
    sources: cabc.Mapping[str, str] | None = None,
    sidebars_location: str = "sidebars",
) -> SiteBuild:
    """Validate ``config``, build the sidebars and resolve every link target.

    Parameters
    ----------
    config : SiteConfig
        Site configuration to validate.
    sidebars_raw : Mapping[str, Any]
        Sidebar name to node specs, as loaded from ``sidebars.yaml``.
    known_ids : Collection[str]
        Document IDs present in the docs corpus.
    sources : Mapping[str, str], optional
        Docs-relative source path per document ID, used for edit links.
    sidebars_location : str, optional
        Source reported when no sidebars are declared.

    Returns
    -------
    SiteBuild
        The validated pair plus any tolerated broken-link warnings.

    Raises
    ------
    SiteConfigError
        On the first violated site or sidebar invariant, including an
        unresolved internal link when ``on_broken_links`` is ``throw``.
    """
    validate_site_config(config)
    sidebars = build_sidebars(
        sidebars_raw, known_ids=known_ids, location=sidebars_location
    )
    warnings = _resolve_links(config, sidebars, known_ids)
    return SiteBuild(
        config=config,
        sidebars=sidebars,
        warnings=tuple(warnings),
        sources=dict(sources or {}),
    )


def doc_id_for_path(path: str, *, route_base: str = "docs") -> str:
    """Map an internal link path such as ``/docs/intro#scope`` to a doc ID."""
    cleaned = path.split("#", 1)[0].split("?", 1)[0].strip().strip("/")
    base = route_base.strip("/")
    if base and cleaned == base:
        return ""
    if base and cleaned.startswith(f"{base}/"):
        cleaned = cleaned[len(base) + 1 :]
    return cleaned


def _resolve_links(
    config: SiteConfig,
    sidebars: cabc.Mapping[str, SidebarTree],
    known_ids: cabc.Collection[str],
) -> list[str]:
    warnings: list[str] = []
    for location, item in config.iter_links():
        match item.target:
            case InternalDoc(path=path):
                doc_id = doc_id_for_path(path, route_base=config.docs_route_base)
                if doc_id in known_ids:
                    continue
                error = UnresolvedDocIdError(doc_id or path, location=location)
            case SidebarRef(sidebar_id=sidebar_id):
                if sidebar_id in sidebars:
                    continue
                error = UnresolvedDocIdError(
                    sidebar_id,
                    location=location,
                    message=f"Unknown sidebar '{sidebar_id}'.",
                )
            case _:
                continue
        if config.on_broken_links == "throw":
            raise error
        if config.on_broken_links != "ignore":
            warnings.append(str(error))
    return warnings


def build_manifest(build: SiteBuild) -> dict[str, typ.Any]:
    """Return the JSON-ready manifest describing ``build``."""
    config = build.config
    return {
        "site": {
            "title": config.title,
            "tagline": config.tagline,
            "url": config.site_url,
            "baseUrl": config.base_url,
            "favicon": config.favicon,
            "organizationName": config.organization_name,
            "projectName": config.project_name,
            "repositoryUrl": config.repository_url,
            "onBrokenLinks": config.on_broken_links,
            "onBrokenMarkdownLinks": config.on_broken_markdown_links,
            "i18n": {
                "defaultLocale": config.i18n.default_locale,
                "locales": sorted(config.i18n.locales),
            },
        },
        "navbar": {
            "title": config.navbar.title,
            "logo": None if config.navbar.logo is None else dict(config.navbar.logo),
            "hideOnScroll": config.navbar.hide_on_scroll,
            "items": [_link_payload(build, item) for item in config.navbar.items],
        },
        "footer": {
            "style": config.footer.style,
            "copyright": config.footer.copyright,
            "links": [
                {
                    "title": column.title,
                    "items": [_link_payload(build, item) for item in column.items],
                }
                for column in config.footer.columns
            ],
        },
        "presets": dict(config.presets),
        "themeConfig": dict(config.theme_config),
        "sidebars": {
            name: {
                "items": [_node_payload(node) for node in tree.nodes],
                "pages": _pages_payload(build, tree),
            }
            for name, tree in build.sidebars.items()
        },
        "warnings": list(build.warnings),
    }


def write_manifest(build: SiteBuild, path: Path) -> Path:
    """Write the site manifest for ``build`` as UTF-8 JSON to ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    manifest = build_manifest(build)
    text = json.dumps(manifest, indent=2, ensure_ascii=False, default=str)
    path.write_text(text + "\n", encoding="utf-8")
    return path


def _link_payload(build: SiteBuild, item: LinkItem) -> dict[str, typ.Any]:
    payload: dict[str, typ.Any] = {"label": item.label}
    if item.position:
        payload["position"] = item.position
    if item.class_name:
        payload["className"] = item.class_name
    config = build.config
    match item.target:
        case ExternalLink(url=url):
            payload["href"] = url
        case InternalDoc(path=path):
            doc_id = doc_id_for_path(path, route_base=config.docs_route_base)
            payload["to"] = config.doc_route(doc_id) if doc_id else path
            payload["docId"] = doc_id
        case SidebarRef(sidebar_id=sidebar_id):
            payload["sidebarId"] = sidebar_id
            tree = build.sidebars.get(sidebar_id)
            first = tree.first_doc if tree else None
            if first is not None:
                payload["to"] = config.doc_route(first.id)
    return payload


def _node_payload(node: SidebarNode) -> dict[str, typ.Any]:
    if isinstance(node, CategoryEntry):
        return {
            "type": "category",
            "label": node.label,
            "collapsed": node.collapsed,
            "items": [_node_payload(child) for child in node.children],
        }
    return {"type": "doc", "id": node.id, "label": node.label}


def _pages_payload(build: SiteBuild, tree: SidebarTree) -> list[dict[str, typ.Any]]:
    config = build.config
    pages: list[dict[str, typ.Any]] = []
    for doc in tree.docs:
        previous, following = tree.neighbours(doc.id)
        source = build.sources.get(doc.id) or f"{doc.id}.md"
        pages.append(
            {
                "id": doc.id,
                "label": doc.label,
                "url": config.doc_url(doc.id),
                "editUrl": config.edit_url(source),
                "previous": previous.id if previous else None,
                "next": following.id if following else None,
                "breadcrumbs": list(tree.breadcrumbs(doc.id)),
            }
        )
    return pages


__all__ = [
    "SiteBuild",
    "assemble_site",
    "build_manifest",
    "doc_id_for_path",
    "write_manifest",
]
