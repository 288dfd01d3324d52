"""Build the navigation sidebars consumed by the documentation renderer.

Sidebars are declared in ``sidebars.yaml`` as ordered lists of documents and
collapsible categories. Building one checks that every document ID is known
and appears once, and that no category is empty, then records the depth-first
document order used for previous/next page links.
"""

from .builder import NodeSpec, build_sidebar, build_sidebars
from .loader import load_sidebars
from .models import CategoryEntry, DocEntry, SidebarNode, SidebarTree

__all__ = [
    "CategoryEntry",
    "DocEntry",
    "NodeSpec",
    "SidebarNode",
    "SidebarTree",
    "build_sidebar",
    "build_sidebars",
    "load_sidebars",
]
