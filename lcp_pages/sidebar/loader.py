"""Load sidebar declarations from YAML."""

from __future__ import annotations

import typing as typ

from ..config.helpers import load_yaml_mapping
from .builder import build_sidebars

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .models import SidebarTree


def load_sidebars(
    path: Path, *, known_ids: cabc.Collection[str]
) -> dict[str, SidebarTree]:
    """Load ``sidebars.yaml`` and build every sidebar it declares.

    The file maps sidebar names to ordered node lists, mirroring the
    Docusaurus ``sidebars.ts`` object.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    SidebarError
        If no sidebars are declared or a tree invariant is violated.
    """
    raw = load_yaml_mapping(path)
    return build_sidebars(raw, known_ids=known_ids, location=str(path))


__all__ = ["load_sidebars"]
