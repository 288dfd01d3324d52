"""Validate a :class:`SiteConfig` before it is handed to the renderer.

Validation is pure: the input is never modified and a valid config is
returned as the very same object, so validating twice is a no-op. Checks run
in a fixed order and the first violation raises.

Examples
--------
>>> from lcp_pages.config import SiteConfig, validate_site_config
>>> config = SiteConfig(
...     title="Docs",
...     tagline="Reference",
...     site_url="https://example.com",
...     base_url="/docs-site/",
...     organization_name="example",
...     project_name="docs-site",
... )
>>> validate_site_config(config) is config
True
"""

from __future__ import annotations

import typing as typ
from urllib.parse import urlsplit

from .._constants import BROKEN_LINK_POLICIES, NAVBAR_POSITIONS
from ..errors import (
    EmptyLocaleSetError,
    InvalidUrlError,
    MissingFieldError,
    SiteConfigError,
)
from .models import ExternalLink

if typ.TYPE_CHECKING:
    from .models import LinkItem, SiteConfig

REQUIRED_FIELDS = (
    "title",
    "tagline",
    "base_url",
    "organization_name",
    "project_name",
)


def validate_site_config(config: SiteConfig) -> SiteConfig:
    """Check every invariant of ``config`` and return it unchanged.

    Parameters
    ----------
    config : SiteConfig
        Site configuration built by :func:`load_site_config` or by hand.

    Returns
    -------
    SiteConfig
        The same ``config`` instance.

    Raises
    ------
    MissingFieldError
        If a required string field, a link label, or a footer column title is
        empty.
    InvalidUrlError
        If ``base_url`` does not start and end with ``/`` or an external link
        is not an absolute URL.
    AmbiguousLinkTargetError
        If a link sets both or neither of its target fields.
    EmptyLocaleSetError
        If no locales are configured or the default locale is not among them.
    SiteConfigError
        If a broken-link policy or navbar position is not recognised.
    """
    for name in REQUIRED_FIELDS:
        if not str(getattr(config, name) or "").strip():
            msg = f"Required field '{name}' is empty."
            raise MissingFieldError(msg, location=name)

    if not (config.base_url.startswith("/") and config.base_url.endswith("/")):
        msg = f"base_url '{config.base_url}' must start and end with '/'."
        raise InvalidUrlError(msg, location="base_url")

    _validate_locales(config)
    _validate_policies(config)

    for index, column in enumerate(config.footer.columns):
        if not column.title.strip():
            msg = "Footer column title is empty."
            raise MissingFieldError(msg, location=f"footer.columns[{index}]")

    for location, item in config.iter_links():
        _validate_link(item, location)
        if location.startswith("navbar.") and item.position not in NAVBAR_POSITIONS:
            msg = (
                f"Navbar position {item.position!r} must be one of "
                f"{', '.join(sorted(NAVBAR_POSITIONS))}."
            )
            raise SiteConfigError(msg, location=location)

    return config


def is_absolute_url(url: str) -> bool:
    """Return True when ``url`` carries both a scheme and a host."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return bool(parts.scheme and parts.netloc and parts.hostname)


def _validate_locales(config: SiteConfig) -> None:
    locales = config.i18n.locales
    if not locales:
        msg = "No locales configured."
        raise EmptyLocaleSetError(msg, location="i18n.locales")
    if config.i18n.default_locale not in locales:
        msg = (
            f"Default locale '{config.i18n.default_locale}' is missing from "
            f"locales ({', '.join(sorted(locales))})."
        )
        raise EmptyLocaleSetError(msg, location="i18n.locales")


def _validate_policies(config: SiteConfig) -> None:
    for name in ("on_broken_links", "on_broken_markdown_links"):
        value = getattr(config, name)
        if value not in BROKEN_LINK_POLICIES:
            msg = (
                f"'{value}' is not a broken-link policy; expected one of "
                f"{', '.join(sorted(BROKEN_LINK_POLICIES))}."
            )
            raise SiteConfigError(msg, location=name)


def _validate_link(item: LinkItem, location: str) -> None:
    if not item.label.strip():
        msg = "Link label is empty."
        raise MissingFieldError(msg, location=location)
    try:
        target = item.target
    except SiteConfigError as exc:
        exc.location = location
        raise
    if isinstance(target, ExternalLink) and not is_absolute_url(target.url):
        msg = f"'{target.url}' is not an absolute URL."
        raise InvalidUrlError(msg, location=location)


__all__ = ["REQUIRED_FIELDS", "is_absolute_url", "validate_site_config"]
