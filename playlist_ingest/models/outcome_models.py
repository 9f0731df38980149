"""Tagged result of a playlist fetch."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..errors import IngestError
from .playlist_models import FetchedPlaylist


class FetchStatus(str, Enum):
    """Terminal state of a playlist fetch."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    FAILED = "failed"


class FailureReason(str, Enum):
    """Why a fetch ended in the failed state."""

    INVALID_URL = "invalid_url"
    TRANSPORT = "transport"


class FetchOutcome(BaseModel):
    """One of three terminal states: found (possibly with zero videos), not found, or failed."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: FetchStatus
    playlist: Optional[FetchedPlaylist] = None
    reason: Optional[FailureReason] = None
    status_code: Optional[int] = None
    error: Optional[IngestError] = None

    @classmethod
    def found(cls, playlist: FetchedPlaylist) -> "FetchOutcome":
        return cls(status=FetchStatus.FOUND, playlist=playlist)

    @classmethod
    def not_found(cls) -> "FetchOutcome":
        return cls(status=FetchStatus.NOT_FOUND)

    @classmethod
    def failed(cls, reason: FailureReason, error: IngestError, status_code: Optional[int] = None) -> "FetchOutcome":
        return cls(status=FetchStatus.FAILED, reason=reason, error=error, status_code=status_code)

    @property
    def ok(self) -> bool:
        return self.status is not FetchStatus.FAILED

    def raise_for_failure(self) -> None:
        """Re-raises the captured error of a failed outcome; no-op otherwise."""

        if self.status is FetchStatus.FAILED and self.error is not None:
            raise self.error
