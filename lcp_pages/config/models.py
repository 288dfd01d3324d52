"""Typed dataclasses describing the documentation site configuration."""

from __future__ import annotations

import dataclasses as dc
import types
import typing as typ

from ..errors import AmbiguousLinkTargetError


@dc.dataclass(frozen=True, slots=True)
class InternalDoc:
    """Link target pointing at a document page of this site."""

    path: str


@dc.dataclass(frozen=True, slots=True)
class ExternalLink:
    """Link target pointing at an absolute external URL."""

    url: str


@dc.dataclass(frozen=True, slots=True)
class SidebarRef:
    """Link target pointing at the first page of a named sidebar."""

    sidebar_id: str


LinkTarget = InternalDoc | ExternalLink | SidebarRef


def readonly_mapping(
    value: typ.Mapping[str, typ.Any],
) -> types.MappingProxyType[str, typ.Any]:
    """Return a read-only view over a private copy of ``value``.

    Only the top level is frozen; nested containers remain as loaded.
    """
    return types.MappingProxyType(dict(value))


@dc.dataclass(frozen=True, slots=True)
class LinkItem:
    """Labelled navbar or footer link.

    Exactly one of ``to``, ``href`` and ``sidebar`` is expected to be set;
    :attr:`target` exposes the chosen one as a tagged variant.
    """

    label: str
    to: str | None = None
    href: str | None = None
    sidebar: str | None = None
    position: str | None = None
    class_name: str | None = None

    @property
    def target_fields(self) -> tuple[str, ...]:
        """Return the names of the raw target fields that are set."""
        return tuple(
            name for name in ("to", "href", "sidebar") if getattr(self, name)
        )

    @property
    def target(self) -> LinkTarget:
        """Return the link destination, rejecting ambiguous declarations."""
        fields = self.target_fields
        if len(fields) != 1:
            if fields:
                detail = "sets " + " and ".join(fields)
            else:
                detail = "sets none of to/href/sidebar"
            msg = f"Link '{self.label}' {detail}; exactly one target is required."
            raise AmbiguousLinkTargetError(msg)
        match fields[0]:
            case "to":
                return InternalDoc(typ.cast("str", self.to))
            case "href":
                return ExternalLink(typ.cast("str", self.href))
            case _:
                return SidebarRef(typ.cast("str", self.sidebar))


@dc.dataclass(frozen=True, slots=True)
class FooterColumn:
    """Titled group of footer links."""

    title: str
    items: tuple[LinkItem, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class NavbarConfig:
    """Site-wide navbar chrome."""

    title: str = ""
    items: tuple[LinkItem, ...] = ()
    logo: typ.Mapping[str, typ.Any] | None = dc.field(default=None, hash=False)
    hide_on_scroll: bool = False

    def __post_init__(self) -> None:
        if self.logo is not None:
            object.__setattr__(self, "logo", readonly_mapping(self.logo))


@dc.dataclass(frozen=True, slots=True)
class FooterConfig:
    """Site-wide footer chrome."""

    style: str = "light"
    columns: tuple[FooterColumn, ...] = ()
    copyright: str | None = None


@dc.dataclass(frozen=True, slots=True)
class I18nConfig:
    """Locale settings for the generated site."""

    default_locale: str = "en"
    locales: frozenset[str] = frozenset({"en"})


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Global site metadata, link collections and opaque renderer options."""

    title: str
    tagline: str
    site_url: str
    base_url: str
    organization_name: str
    project_name: str
    i18n: I18nConfig = dc.field(default_factory=I18nConfig)
    navbar: NavbarConfig = dc.field(default_factory=NavbarConfig)
    footer: FooterConfig = dc.field(default_factory=FooterConfig)
    favicon: str | None = None
    on_broken_links: str = "throw"
    on_broken_markdown_links: str = "warn"
    edit_branch: str = "main"
    edit_root: str = "website/"
    docs_route_base: str = "docs"
    docs_path: str = "docs"
    presets: typ.Mapping[str, typ.Any] = dc.field(default_factory=dict, hash=False)
    theme_config: typ.Mapping[str, typ.Any] = dc.field(
        default_factory=dict, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "presets", readonly_mapping(self.presets))
        object.__setattr__(self, "theme_config", readonly_mapping(self.theme_config))

    @property
    def repository_url(self) -> str:
        """Return the canonical GitHub repository URL."""
        return f"https://github.com/{self.organization_name}/{self.project_name}"

    def edit_url(self, doc_path: str) -> str:
        """Return the "edit this page" URL for a docs-relative source path."""
        segments = [
            self.edit_root.strip("/"),
            self.docs_path.strip("/"),
            doc_path.strip("/"),
        ]
        tail = "/".join(segment for segment in segments if segment)
        return f"{self.repository_url}/tree/{self.edit_branch}/{tail}"

    def doc_route(self, doc_id: str) -> str:
        """Return the site-relative route of a document page."""
        route = self.docs_route_base.strip("/")
        prefix = f"{self.base_url}{route}/" if route else self.base_url
        return f"{prefix}{doc_id}"

    def doc_url(self, doc_id: str) -> str:
        """Return the canonical absolute URL of a document page."""
        return f"{self.site_url.rstrip('/')}{self.doc_route(doc_id)}"

    def iter_links(self) -> typ.Iterator[tuple[str, LinkItem]]:
        """Yield every navbar and footer link together with its location."""
        for index, item in enumerate(self.navbar.items):
            yield f"navbar.items[{index}]", item
        for col_index, column in enumerate(self.footer.columns):
            for index, item in enumerate(column.items):
                yield f"footer.columns[{col_index}].items[{index}]", item


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
    "readonly_mapping",
]
