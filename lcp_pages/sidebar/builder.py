"""Assemble and validate sidebar trees from declarative node specs.

A node spec is either a bare document ID string, a mapping in the Docusaurus
sidebar shape (``{"type": "doc", "id": ...}`` or ``{"type": "category",
"label": ..., "items": [...]}``), or an already constructed
:class:`DocEntry`/:class:`CategoryEntry`. :func:`build_sidebar` walks the
specs depth-first in declared order, builds every category from its validated
children, and stops at the first violated invariant.

Examples
--------
>>> from lcp_pages.sidebar import build_sidebar
>>> tree = build_sidebar(
...     "docsSidebar",
...     ["intro", {"type": "category", "label": "Spec", "items": ["architecture"]}],
...     known_ids={"intro", "architecture"},
... )
>>> tree.doc_ids
('intro', 'architecture')
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from ..config.helpers import _as_list, _optional_str, _pick
from ..errors import (
    DuplicateDocIdError,
    EmptyCategoryError,
    MissingFieldError,
    SidebarError,
    UnresolvedDocIdError,
)
from .models import CategoryEntry, DocEntry, SidebarNode, SidebarTree

NodeSpec = str | cabc.Mapping[str, typ.Any] | DocEntry | CategoryEntry


def build_sidebar(
    name: str,
    nodes: cabc.Iterable[NodeSpec],
    *,
    known_ids: cabc.Collection[str],
) -> SidebarTree:
    """Build a validated :class:`SidebarTree` named ``name``.

    Parameters
    ----------
    name : str
        Sidebar identifier (``docsSidebar`` in the default site).
    nodes : Iterable[NodeSpec]
        Top-level node specs in navigation order.
    known_ids : Collection[str]
        Document IDs present in the docs corpus.

    Returns
    -------
    SidebarTree
        The tree with its flattened depth-first document order.

    Raises
    ------
    DuplicateDocIdError
        If a document ID occurs twice anywhere in the tree.
    EmptyCategoryError
        If a category has no children.
    UnresolvedDocIdError
        If a document ID is not in ``known_ids``.
    MissingFieldError
        If a document ID or category label is empty.
    SidebarError
        If a node spec has an unsupported shape or type.
    """
    walker = _SidebarWalker(known_ids)
    built = tuple(walker.visit_all(list(nodes), (name,), ()))
    return SidebarTree(
        name=name,
        nodes=built,
        docs=tuple(walker.docs),
        trails=dict(walker.trails),
    )


def build_sidebars(
    raw: cabc.Mapping[str, typ.Any],
    *,
    known_ids: cabc.Collection[str],
    location: str = "sidebars",
) -> dict[str, SidebarTree]:
    """Build every named sidebar of a sidebars mapping, preserving order.

    Raises
    ------
    SidebarError
        If ``raw`` declares no sidebars, or a tree invariant is violated.
    """
    if not raw:
        msg = "No sidebars declared."
        raise SidebarError(msg, location=location)
    sidebars: dict[str, SidebarTree] = {}
    for name, nodes in raw.items():
        sidebars[str(name)] = build_sidebar(
            str(name),
            _as_list(nodes, location=str(name)),
            known_ids=known_ids,
        )
    return sidebars


class _SidebarWalker:
    """Depth-first traversal state shared across one sidebar build."""

    def __init__(self, known_ids: cabc.Collection[str]) -> None:
        self.known_ids = known_ids
        self.seen: dict[str, str] = {}
        self.docs: list[DocEntry] = []
        self.trails: dict[str, tuple[str, ...]] = {}

    def visit_all(
        self,
        specs: list[NodeSpec],
        path: tuple[str, ...],
        trail: tuple[str, ...],
    ) -> cabc.Iterator[SidebarNode]:
        for index, spec in enumerate(specs):
            yield self.visit(spec, (*path, f"[{index}]"), trail)

    def visit(
        self,
        spec: NodeSpec,
        path: tuple[str, ...],
        trail: tuple[str, ...],
    ) -> SidebarNode:
        match spec:
            case DocEntry():
                return self._visit_doc(spec.id, spec.label, path, trail)
            case CategoryEntry():
                return self._visit_category(
                    spec.label, list(spec.children), spec.collapsed, path, trail
                )
            case str():
                return self._visit_doc(spec, None, path, trail)
            case cabc.Mapping():
                return self._visit_mapping(spec, path, trail)
            case _:
                msg = f"Unsupported sidebar node {spec!r}."
                raise SidebarError(msg, location=_format_path(path))

    def _visit_mapping(
        self,
        spec: cabc.Mapping[str, typ.Any],
        path: tuple[str, ...],
        trail: tuple[str, ...],
    ) -> SidebarNode:
        kind = spec.get("type") or ("category" if "items" in spec else "doc")
        match kind:
            case "doc":
                return self._visit_doc(
                    str(_pick(spec, "id", "docId", default="") or ""),
                    _optional_str(spec.get("label")),
                    path,
                    trail,
                )
            case "category":
                return self._visit_category(
                    str(spec.get("label") or ""),
                    _as_list(
                        _pick(spec, "items", "children"),
                        location=_format_path(path),
                    ),
                    bool(spec.get("collapsed", True)),
                    path,
                    trail,
                )
            case _:
                msg = f"Unsupported sidebar item type '{kind}'."
                raise SidebarError(msg, location=_format_path(path))

    def _visit_doc(
        self,
        doc_id: str,
        label: str | None,
        path: tuple[str, ...],
        trail: tuple[str, ...],
    ) -> DocEntry:
        location = _format_path(path)
        doc_id = doc_id.strip()
        if not doc_id:
            msg = "Sidebar document entry has an empty id."
            raise MissingFieldError(msg, location=location)
        if doc_id in self.seen:
            raise DuplicateDocIdError(
                doc_id, location=f"{location} (first seen at {self.seen[doc_id]})"
            )
        self.seen[doc_id] = location
        if doc_id not in self.known_ids:
            raise UnresolvedDocIdError(doc_id, location=location)
        entry = DocEntry(id=doc_id, label=label)
        self.docs.append(entry)
        self.trails[doc_id] = trail
        return entry

    def _visit_category(
        self,
        label: str,
        children: list[NodeSpec],
        collapsed: bool,
        path: tuple[str, ...],
        trail: tuple[str, ...],
    ) -> CategoryEntry:
        location = _format_path(path)
        if not label.strip():
            msg = "Sidebar category has an empty label."
            raise MissingFieldError(msg, location=location)
        if not children:
            msg = f"Category '{label}' has no items."
            raise EmptyCategoryError(msg, location=location)
        category_path = (*path[:-1], label)
        built = tuple(self.visit_all(children, category_path, (*trail, label)))
        return CategoryEntry(label=label, children=built, collapsed=collapsed)


def _format_path(path: tuple[str, ...]) -> str:
    return " > ".join(path)


__all__ = ["NodeSpec", "build_sidebar", "build_sidebars"]
