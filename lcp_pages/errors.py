"""Configuration error taxonomy shared by the site config and sidebar layers.

Every error is a build-time configuration error: it is raised on the first
violation found and carries the location of the offending field or node so
the CLI can report ``error: <location>: <message>`` and halt the build.
"""

from __future__ import annotations


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""

    def __init__(self, message: str, *, location: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self) -> str:
        if self.location:
            return f"{self.location}: {self.message}"
        return self.message


class MissingFieldError(SiteConfigError):
    """A required string field is empty or absent."""


class InvalidUrlError(SiteConfigError):
    """A base URL or external link URL is malformed."""


class AmbiguousLinkTargetError(SiteConfigError):
    """A link item sets both or neither of its target fields."""


class EmptyLocaleSetError(SiteConfigError):
    """The locale set is empty or lacks the default locale."""


class SidebarError(SiteConfigError):
    """Raised when a sidebar declaration violates a tree invariant."""


class DuplicateDocIdError(SidebarError):
    """A document ID appears more than once in the same sidebar."""

    def __init__(self, doc_id: str, *, location: str | None = None) -> None:
        super().__init__(f"Document '{doc_id}' appears twice.", location=location)
        self.doc_id = doc_id


class EmptyCategoryError(SidebarError):
    """A category declares no children."""


class UnresolvedDocIdError(SiteConfigError):
    """A sidebar entry or internal link names no known document."""

    def __init__(
        self,
        doc_id: str,
        *,
        location: str | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            message or f"Unknown document '{doc_id}'.", location=location
        )
        self.doc_id = doc_id


__all__ = [
    "AmbiguousLinkTargetError",
    "DuplicateDocIdError",
    "EmptyCategoryError",
    "EmptyLocaleSetError",
    "InvalidUrlError",
    "MissingFieldError",
    "SidebarError",
    "SiteConfigError",
    "UnresolvedDocIdError",
]
