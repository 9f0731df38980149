"""Exception hierarchy shared by the API, ingest, and import layers."""

from __future__ import annotations

from typing import Optional


class IngestError(Exception):
    """Base class for every failure raised by playlist_ingest."""


class InvalidUrlError(IngestError, ValueError):
    """Raised when a URL does not match any supported playlist or video shape."""

    def __init__(self, url: str, kind: str = "playlist") -> None:
        super().__init__(f"Invalid YouTube {kind} URL: {url!r}")
        self.url = url
        self.kind = kind


class MissingCredentialError(IngestError):
    """Raised when no YouTube Data API key is configured."""


class TransportError(IngestError):
    """Raised when the Data API answers with a non-success status or cannot be reached."""

    def __init__(self, message: str, status: Optional[int] = None, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.status = status
        self.url = url


class AuthenticationError(TransportError):
    """Raised when the Data API rejects the key (invalid, restricted, or out of quota)."""


class PlaylistNotFoundError(IngestError):
    """Raised by the importer when the playlist is private, deleted, or unknown."""


class CourseNotFoundError(IngestError):
    """Raised when the target course does not exist or belongs to another user."""


class ImportValidationError(IngestError, ValueError):
    """Raised when an import request is missing required fields."""
