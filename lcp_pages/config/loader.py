"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from .helpers import (
    _as_list,
    _as_mapping,
    _normalize_locales,
    _optional_str,
    _pick,
    load_yaml_mapping,
)
from .models import (
    FooterColumn,
    FooterConfig,
    I18nConfig,
    LinkItem,
    NavbarConfig,
    SiteConfig,
)
from .validator import validate_site_config

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_site_config(path: Path) -> SiteConfig:
    """Load and validate the YAML file describing the documentation site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML site configuration (for example,
        ``config/site.yaml``). Keys follow the Docusaurus names (``baseUrl``,
        ``organizationName``, ``themeConfig``...) and their snake_case
        spellings are accepted too.

    Returns
    -------
    SiteConfig
        Validated site configuration. ``themeConfig.navbar`` and
        ``themeConfig.footer`` are parsed into typed link collections; the
        rest of ``themeConfig`` and ``presets`` pass through untouched.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure, or a nested block, has the wrong
        shape.
    SiteConfigError
        If the loaded configuration violates a site invariant (see
        :func:`validate_site_config`).

    Examples
    --------
    >>> from pathlib import Path
    >>> from lcp_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.repository_url  # doctest: +SKIP
    'https://github.com/Turf-Tech/lcp-spec'
    """
    raw = load_yaml_mapping(path)
    return validate_site_config(build_site_config(raw))


def build_site_config(raw: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Build an unvalidated :class:`SiteConfig` from a parsed mapping."""
    theme_config = _as_mapping(
        _pick(raw, "themeConfig", "theme_config"), location="themeConfig"
    )
    navbar_raw = _as_mapping(theme_config.pop("navbar", None), location="navbar")
    footer_raw = _as_mapping(theme_config.pop("footer", None), location="footer")
    edit_raw = _as_mapping(raw.get("edit"), location="edit")

    return SiteConfig(
        title=str(raw.get("title") or ""),
        tagline=str(raw.get("tagline") or ""),
        site_url=str(_pick(raw, "url", "site_url", default="") or ""),
        base_url=str(_pick(raw, "baseUrl", "base_url", default="") or ""),
        organization_name=str(
            _pick(raw, "organizationName", "organization_name", default="") or ""
        ),
        project_name=str(_pick(raw, "projectName", "project_name", default="") or ""),
        i18n=_build_i18n(_as_mapping(raw.get("i18n"), location="i18n")),
        navbar=_build_navbar(navbar_raw),
        footer=_build_footer(footer_raw),
        favicon=_optional_str(raw.get("favicon")),
        on_broken_links=str(
            _pick(raw, "onBrokenLinks", "on_broken_links", default="throw")
        ),
        on_broken_markdown_links=str(
            _pick(
                raw,
                "onBrokenMarkdownLinks",
                "on_broken_markdown_links",
                default="warn",
            )
        ),
        edit_branch=str(edit_raw.get("branch", "main")),
        edit_root=str(edit_raw.get("root", "website/")),
        docs_route_base=str(
            _pick(raw, "docsRouteBase", "docs_route_base", default="docs")
        ),
        docs_path=str(_pick(raw, "docsPath", "docs_path", default="docs")),
        presets=_as_mapping(raw.get("presets"), location="presets"),
        theme_config=theme_config,
    )


def _build_i18n(payload: typ.Mapping[str, typ.Any]) -> I18nConfig:
    default_locale = str(
        _pick(payload, "defaultLocale", "default_locale", default="en")
    )
    if "locales" in payload:
        locales = _normalize_locales(payload["locales"])
    else:
        locales = frozenset({default_locale})
    return I18nConfig(default_locale=default_locale, locales=locales)


def _build_navbar(payload: typ.Mapping[str, typ.Any]) -> NavbarConfig:
    items = tuple(
        _build_link_item(
            item, location=f"navbar.items[{index}]", default_position="left"
        )
        for index, item in enumerate(
            _as_list(payload.get("items"), location="navbar.items")
        )
    )
    logo = payload.get("logo")
    return NavbarConfig(
        title=str(payload.get("title") or ""),
        items=items,
        logo=_as_mapping(logo, location="navbar.logo") if logo else None,
        hide_on_scroll=bool(_pick(payload, "hideOnScroll", "hide_on_scroll")),
    )


def _build_footer(payload: typ.Mapping[str, typ.Any]) -> FooterConfig:
    columns: list[FooterColumn] = []
    raw_columns = _as_list(
        _pick(payload, "links", "columns"), location="footer.columns"
    )
    for col_index, column in enumerate(raw_columns):
        location = f"footer.columns[{col_index}]"
        column_raw = _as_mapping(column, location=location)
        items = tuple(
            _build_link_item(item, location=f"{location}.items[{index}]")
            for index, item in enumerate(
                _as_list(column_raw.get("items"), location=f"{location}.items")
            )
        )
        columns.append(
            FooterColumn(title=str(column_raw.get("title") or ""), items=items)
        )
    return FooterConfig(
        style=str(payload.get("style") or "light"),
        columns=tuple(columns),
        copyright=_optional_str(payload.get("copyright")),
    )


def _build_link_item(
    payload: object, *, location: str, default_position: str | None = None
) -> LinkItem:
    """Build a link item, mapping Docusaurus ``doc``/``docSidebar`` types.

    Navbar items without a ``position`` are placed on the left.
    """
    item = _as_mapping(payload, location=location)
    to = _optional_str(item.get("to"))
    sidebar = _optional_str(_pick(item, "sidebar", "sidebarId", "sidebar_id"))
    if item.get("type") == "doc":
        to = to or _optional_str(_pick(item, "docId", "doc_id"))
    return LinkItem(
        label=str(item.get("label") or ""),
        to=to,
        href=_optional_str(item.get("href")),
        sidebar=sidebar,
        position=_optional_str(item.get("position")) or default_position,
        class_name=_optional_str(_pick(item, "className", "class_name")),
    )


__all__ = ["build_site_config", "load_site_config"]
