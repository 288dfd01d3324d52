"""Utility helpers shared by the site and sidebar configuration loaders."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

_MISSING = object()


def parse_yaml(text: str, *, source: Path) -> typ.Any:
    """Parse ``text`` as safe YAML 1.2, reporting failures against ``source``.

    Raises
    ------
    SiteConfigError
        If the text is not well-formed YAML.
    """
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        return loader.load(text)
    except YAMLError as exc:
        msg = f"Invalid YAML: {exc}"
        raise SiteConfigError(msg, location=str(source)) from exc


def read_text(path: Path) -> str:
    """Return the UTF-8 contents of ``path``.

    Raises
    ------
    SiteConfigError
        If the file is not valid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        msg = f"File is not valid UTF-8: {exc.reason} at byte {exc.start}."
        raise SiteConfigError(msg, location=str(path)) from exc


def load_yaml_mapping(path: Path) -> dict[str, typ.Any]:
    """Read ``path`` as YAML 1.2 and return its top-level mapping.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    SiteConfigError
        If the file is not UTF-8 or not well-formed YAML.
    TypeError
        If the document is not a mapping.
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loaded = parse_yaml(read_text(path), source=path) or {}
    if not isinstance(loaded, dict):
        msg = f"Top-level YAML structure in '{path}' must be a mapping."
        raise TypeError(msg)
    return dict(loaded)


def _pick(
    payload: typ.Mapping[str, typ.Any], *keys: str, default: typ.Any = None
) -> typ.Any:
    """Return the first present key, accepting camelCase and snake_case."""
    for key in keys:
        value = payload.get(key, _MISSING)
        if value is not _MISSING:
            return value
    return default


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_mapping(value: object, *, location: str) -> dict[str, typ.Any]:
    """Return ``value`` as a dict, treating None as empty."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"Expected a mapping at '{location}', got {type(value).__name__}."
        raise TypeError(msg)
    return dict(value)


def _as_list(value: object, *, location: str) -> list[typ.Any]:
    """Return ``value`` as a list, treating None as empty."""
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"Expected a list at '{location}', got {type(value).__name__}."
        raise TypeError(msg)
    return list(value)


def _normalize_locales(value: str | list[object] | None) -> frozenset[str]:
    """Normalize a locale declaration into a set of non-empty tags."""
    if isinstance(value, str):
        return frozenset(segment for segment in value.split() if segment)
    if isinstance(value, list):
        return frozenset(
            text for text in (str(segment).strip() for segment in value) if text
        )
    return frozenset()


__all__ = [
    "_as_list",
    "_as_mapping",
    "_normalize_locales",
    "_optional_str",
    "_pick",
    "load_yaml_mapping",
    "parse_yaml",
    "read_text",
]
