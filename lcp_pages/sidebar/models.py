"""Typed dataclasses describing a validated sidebar tree."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ..config.models import readonly_mapping


@dc.dataclass(frozen=True, slots=True)
class DocEntry:
    """Sidebar leaf pointing at a single document.

    Attributes
    ----------
    id : str
        Document ID, unique within the sidebar.
    label : str or None
        Display label; the renderer falls back to the document title when
        ``None``.
    """

    id: str
    label: str | None = None


@dc.dataclass(frozen=True, slots=True)
class CategoryEntry:
    """Collapsible group of sidebar nodes."""

    label: str
    children: tuple[SidebarNode, ...]
    collapsed: bool = True


SidebarNode = DocEntry | CategoryEntry


@dc.dataclass(frozen=True, slots=True)
class SidebarTree:
    """Named, ordered sidebar plus its depth-first list of documents.

    ``docs`` follows the declared order and drives previous/next page
    navigation. ``trails`` maps each document ID to the labels of the
    categories enclosing it.
    """

    name: str
    nodes: tuple[SidebarNode, ...]
    docs: tuple[DocEntry, ...]
    trails: typ.Mapping[str, tuple[str, ...]] = dc.field(
        default_factory=dict, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "trails", readonly_mapping(self.trails))

    @property
    def doc_ids(self) -> tuple[str, ...]:
        """Return document IDs in navigation order."""
        return tuple(doc.id for doc in self.docs)

    def index_of(self, doc_id: str) -> int:
        """Return the navigation position of ``doc_id``."""
        for index, doc in enumerate(self.docs):
            if doc.id == doc_id:
                return index
        msg = f"Document '{doc_id}' is not part of sidebar '{self.name}'."
        raise KeyError(msg)

    def neighbours(self, doc_id: str) -> tuple[DocEntry | None, DocEntry | None]:
        """Return the previous and next documents around ``doc_id``."""
        index = self.index_of(doc_id)
        previous = self.docs[index - 1] if index > 0 else None
        following = self.docs[index + 1] if index + 1 < len(self.docs) else None
        return previous, following

    def breadcrumbs(self, doc_id: str) -> tuple[str, ...]:
        """Return the labels of the categories enclosing ``doc_id``."""
        self.index_of(doc_id)
        return self.trails.get(doc_id, ())

    @property
    def first_doc(self) -> DocEntry | None:
        """Return the landing document of the sidebar, if any."""
        return self.docs[0] if self.docs else None


__all__ = ["CategoryEntry", "DocEntry", "SidebarNode", "SidebarTree"]
