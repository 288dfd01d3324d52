"""Unit tests for site configuration validation.

These tests cover :func:`lcp_pages.config.validate_site_config` against each
error in the configuration taxonomy, plus the helpers that derive canonical
repository, edit and document URLs from the organization and project names.

Usage
-----
Run ``pytest tests/test_site_config.py -v``. The ``make_site_config`` fixture
from ``conftest.py`` builds a valid baseline config that each test tweaks.
"""

from __future__ import annotations

import typing as typ

import pytest

from lcp_pages.config import (
    ExternalLink,
    FooterColumn,
    FooterConfig,
    I18nConfig,
    InternalDoc,
    LinkItem,
    NavbarConfig,
    SidebarRef,
    validate_site_config,
)
from lcp_pages.errors import (
    AmbiguousLinkTargetError,
    EmptyLocaleSetError,
    InvalidUrlError,
    MissingFieldError,
    SiteConfigError,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from lcp_pages.config import SiteConfig


def _footer(*items: LinkItem) -> FooterConfig:
    return FooterConfig(columns=(FooterColumn(title="Links", items=items),))


def test_valid_config_is_returned_unchanged(
    make_site_config: cabc.Callable[..., SiteConfig],
) -> None:
    """Validation returns the same object and is idempotent."""
    config = make_site_config()
    validated = validate_site_config(config)
    assert validated is config, "expected validation to return its input"
    assert validate_site_config(validated) == config, (
        "expected re-validation to leave the config unchanged"
    )


@pytest.mark.parametrize(
    "field",
    ["title", "tagline", "base_url", "organization_name", "project_name"],
)
def test_empty_required_field_is_rejected(
    make_site_config: cabc.Callable[..., SiteConfig], field: str
) -> None:
    """Every required string field must be non-empty."""
    config = make_site_config(**{field: "  "})
    with pytest.raises(MissingFieldError) as excinfo:
        validate_site_config(config)
    assert excinfo.value.location == field


@pytest.mark.parametrize("base_url", ["lcp-spec/", "/lcp-spec", "lcp-spec"])
def test_base_url_requires_surrounding_slashes(
    make_site_config: cabc.Callable[..., SiteConfig], base_url: str
) -> None:
    """A base URL must start and end with a slash."""
    with pytest.raises(InvalidUrlError) as excinfo:
        validate_site_config(make_site_config(base_url=base_url))
    assert excinfo.value.location == "base_url"


def test_root_base_url_is_accepted(
    make_site_config: cabc.Callable[..., SiteConfig],
) -> None:
    """The site root ``/`` both starts and ends with a slash."""
    config = make_site_config(base_url="/")
    assert validate_site_config(config) is config


@pytest.mark.parametrize(
    "url", ["github.com/Turf-Tech", "/docs/intro", "https://", "mailto:team"]
)
def test_external_link_must_be_absolute(
    make_site_config: cabc.Callable[..., SiteConfig], url: str
) -> None:
    """External links need both a scheme and a host."""
    config = make_site_config(footer=_footer(LinkItem(label="Bad", href=url)))
    with pytest.raises(InvalidUrlError) as excinfo:
        validate_site_config(config)
    assert excinfo.value.location == "footer.columns[0].items[0]"


def test_link_with_internal_and_external_target_is_ambiguous(
    make_site_config: cabc.Callable[..., SiteConfig],
) -> None:
    """Setting both an internal doc and an external href is rejected."""
    item = LinkItem(label="X", to="intro", href="https://example.com")
    config = make_site_config(footer=_footer(item))
    with pytest.raises(AmbiguousLinkTargetError) as excinfo:
        validate_site_config(config)
    assert excinfo.value.location == "footer.columns[0].items[0]"
    assert "to and href" in excinfo.value.message


def test_link_without_target_is_ambiguous(
    make_site_config: cabc.Callable[..., SiteConfig],
) -> None:
    """A link must point somewhere."""
    config = make_site_config(
        navbar=NavbarConfig(items=(LinkItem(label="Nowhere"),))
    )
    with pytest.raises(AmbiguousLinkTargetError) as excinfo:
        validate_site_config(config)
    assert excinfo.value.location == "navbar.items[0]"


def test_link_target_variants() -> None:
    """Each raw target field maps to its tagged variant."""
    assert LinkItem(label="a", to="/docs/intro").target == InternalDoc("/docs/intro")
    assert LinkItem(label="b", href="https://x.dev").target == ExternalLink(
        "https://x.dev"
    )
    assert LinkItem(label="c", sidebar="docsSidebar").target == SidebarRef(
        "docsSidebar"
    )


def test_empty_link_label_is_rejected(
    make_site_config: cabc.Callable[..., SiteConfig],
) -> None:
    config = make_site_config(footer=_footer(LinkItem(label="", to="/docs/intro")))
    with pytest.raises(MissingFieldError):
        validate_site_config(config)


@pytest.mark.parametrize(
    "i18n",
    [
        I18nConfig(default_locale="en", locales=frozenset()),
        I18nConfig(default_locale="en", locales=frozenset({"fr", "de"})),
    ],
)
def test_locale_set_must_contain_default(
    make_site_config: cabc.Callable[..., SiteConfig], i18n: I18nConfig
) -> None:
    """Locales must be non-empty and include the default locale."""
    with pytest.raises(EmptyLocaleSetError):
        validate_site_config(make_site_config(i18n=i18n))


def test_unknown_navbar_position_is_rejected(
    make_site_config: cabc.Callable[..., SiteConfig],
) -> None:
    item = LinkItem(label="GitHub", href="https://github.com", position="center")
    config = make_site_config(navbar=NavbarConfig(items=(item,)))
    with pytest.raises(SiteConfigError) as excinfo:
        validate_site_config(config)
    assert excinfo.value.location == "navbar.items[0]"


def test_unknown_broken_link_policy_is_rejected(
    make_site_config: cabc.Callable[..., SiteConfig],
) -> None:
    with pytest.raises(SiteConfigError) as excinfo:
        validate_site_config(make_site_config(on_broken_links="explode"))
    assert excinfo.value.location == "on_broken_links"


def test_canonical_urls(make_site_config: cabc.Callable[..., SiteConfig]) -> None:
    """Repository, edit and page URLs derive from the site identifiers."""
    config = make_site_config()
    assert config.repository_url == "https://github.com/Turf-Tech/lcp-spec"
    assert config.edit_url("intro.md") == (
        "https://github.com/Turf-Tech/lcp-spec/tree/main/website/docs/intro.md"
    )
    assert config.doc_route("intro") == "/lcp-spec/docs/intro"
    assert config.doc_url("intro") == "https://turf-tech.github.io/lcp-spec/docs/intro"


def test_navbar_link_without_position_is_rejected(
    make_site_config: cabc.Callable[..., SiteConfig],
) -> None:
    """Navbar links must be placed on the left or right."""
    item = LinkItem(label="GitHub", href="https://github.com")
    config = make_site_config(navbar=NavbarConfig(items=(item,)))
    with pytest.raises(SiteConfigError) as excinfo:
        validate_site_config(config)
    assert excinfo.value.location == "navbar.items[0]"
    assert "None" in excinfo.value.message


@pytest.mark.parametrize(
    ("overrides", "expected"),
    [
        (
            {"docs_route_base": "/"},
            "https://github.com/Turf-Tech/lcp-spec/tree/main/website/docs/intro.md",
        ),
        (
            {"docs_route_base": "/", "docs_path": ""},
            "https://github.com/Turf-Tech/lcp-spec/tree/main/website/intro.md",
        ),
        (
            {"edit_root": "", "docs_path": "/content/"},
            "https://github.com/Turf-Tech/lcp-spec/tree/main/content/intro.md",
        ),
    ],
)
def test_edit_url_follows_docs_path_not_route(
    make_site_config: cabc.Callable[..., SiteConfig],
    overrides: dict[str, str],
    expected: str,
) -> None:
    """Edit links use the source directory and skip empty segments."""
    config = make_site_config(**overrides)
    assert config.edit_url("intro.md") == expected
    assert "//intro.md" not in config.edit_url("/intro.md")


def test_root_docs_route_serves_pages_at_base_url(
    make_site_config: cabc.Callable[..., SiteConfig],
) -> None:
    config = make_site_config(docs_route_base="/")
    assert config.doc_route("intro") == "/lcp-spec/intro"


def test_site_config_is_hashable_and_read_only(
    make_site_config: cabc.Callable[..., SiteConfig],
) -> None:
    """Opaque renderer options are exposed as read-only mappings."""
    presets = {"classic": {"docs": {"routeBasePath": "docs"}}}
    config = make_site_config(
        presets=presets,
        theme_config={"colorMode": {"defaultMode": "light"}},
        navbar=NavbarConfig(title="LCP", logo={"src": "img/logo.svg"}),
    )
    plain = make_site_config(navbar=NavbarConfig(title="LCP"))
    assert hash(config) == hash(plain), "expected option mappings to be unhashed"
    assert config.presets == presets
    with pytest.raises(TypeError):
        config.presets["classic"] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        config.theme_config["colorMode"] = {}  # type: ignore[index]
    with pytest.raises(TypeError):
        config.navbar.logo["src"] = "x.svg"  # type: ignore[index]
    presets["extra"] = {}
    assert "extra" not in config.presets, "expected the config to own a copy"
