"""Discover the document IDs exposed by a markdown docs directory.

Sidebar entries and internal links are resolved against this set. A document
ID is the file path relative to the docs root, without its suffix and with
numeric ordering prefixes (``01-intro.md``) removed from every segment. A
front-matter ``id`` replaces the final segment. Files or directories whose
name starts with ``_`` are partials and are skipped.

Examples
--------
>>> from pathlib import Path
>>> from lcp_pages.corpus import discover_corpus
>>> corpus = discover_corpus(Path("website/docs"))  # doctest: +SKIP
>>> sorted(corpus.ids)[:2]  # doctest: +SKIP
['architecture', 'core-components']
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from ._constants import DOC_SUFFIXES
from .config.helpers import parse_yaml, read_text
from .errors import DuplicateDocIdError

if typ.TYPE_CHECKING:
    from pathlib import Path

NUMBER_PREFIX_PATTERN = re.compile(r"^\d+\s*[-_.]\s*(?=\S)")
FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?\r?\n)?---[ \t]*(\r?\n|\Z)", re.DOTALL
)


@dc.dataclass(frozen=True, slots=True)
class DocumentCorpus:
    """Known documents keyed by ID, with their docs-relative source paths."""

    sources: dict[str, str]

    @property
    def ids(self) -> frozenset[str]:
        return frozenset(self.sources)

    def source_path(self, doc_id: str) -> str | None:
        """Return the docs-relative file backing ``doc_id``."""
        return self.sources.get(doc_id)


def discover_corpus(docs_dir: Path) -> DocumentCorpus:
    """Scan ``docs_dir`` for markdown documents and collect their IDs.

    Raises
    ------
    FileNotFoundError
        If ``docs_dir`` is not a directory.
    DuplicateDocIdError
        If two files resolve to the same document ID.
    SiteConfigError
        If a document is not UTF-8 or its front matter is not valid YAML.
    """
    if not docs_dir.is_dir():
        msg = f"Docs directory '{docs_dir}' not found."
        raise FileNotFoundError(msg)

    sources: dict[str, str] = {}
    for path in sorted(docs_dir.rglob("*")):
        if not path.is_file() or path.suffix.lower() not in DOC_SUFFIXES:
            continue
        relative = path.relative_to(docs_dir)
        if any(part.startswith("_") for part in relative.parts):
            continue
        doc_id = _doc_id_for(relative.with_suffix("").parts, _front_matter_id(path))
        source = relative.as_posix()
        if doc_id in sources:
            raise DuplicateDocIdError(
                doc_id, location=f"{source} (also {sources[doc_id]})"
            )
        sources[doc_id] = source
    return DocumentCorpus(sources=sources)


def discover_doc_ids(docs_dir: Path) -> frozenset[str]:
    """Return the set of document IDs found under ``docs_dir``."""
    return discover_corpus(docs_dir).ids


def strip_number_prefix(segment: str) -> str:
    """Remove a leading ordering number such as ``01-`` or ``2.``."""
    return NUMBER_PREFIX_PATTERN.sub("", segment, count=1)


def _doc_id_for(parts: tuple[str, ...], front_matter_id: str | None) -> str:
    segments = [strip_number_prefix(part) for part in parts]
    if front_matter_id:
        segments[-1] = front_matter_id
    return "/".join(segments)


def _front_matter_id(path: Path) -> str | None:
    """Return the ``id`` declared in the document's front matter, if any."""
    text = read_text(path)
    match = FRONT_MATTER_PATTERN.match(text)
    if not match or not match.group(1):
        return None
    data = parse_yaml(match.group(1), source=path)
    if not isinstance(data, dict):
        return None
    value = data.get("id")
    if value is None:
        return None
    text_id = str(value).strip()
    return text_id or None


__all__ = [
    "DocumentCorpus",
    "discover_corpus",
    "discover_doc_ids",
    "strip_number_prefix",
]
