"""Environment-driven settings for the YouTube Data API client."""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from ..errors import MissingCredentialError

DEFAULT_API_BASE = "https://www.googleapis.com/youtube/v3/"
API_KEY_ENV = "YOUTUBE_API_KEY"


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


def _env_int(name: str) -> int | None:
    value = _env_str(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logging.warning("Ignoring non-integer value for %s: %r", name, value)
        return None


def _env_float(name: str) -> float | None:
    value = _env_str(name)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        logging.warning("Ignoring non-numeric value for %s: %r", name, value)
        return None


class IngestSettings(BaseModel):
    """Credential and transport knobs for a playlist fetch."""

    api_key: str
    api_base: str = DEFAULT_API_BASE
    timeout: float = 10.0
    max_qps: Optional[float] = None
    concurrent_batches: int = 1

    @classmethod
    def from_env(cls, api_key: Optional[str] = None) -> "IngestSettings":
        """Builds settings from the process environment (and ``.env``).

        ``api_key`` overrides ``YOUTUBE_API_KEY``. A missing key is fatal here so
        that no request is ever issued without a credential.
        """

        load_dotenv()
        key = api_key or _env_str(API_KEY_ENV)
        if not key:
            raise MissingCredentialError(f"{API_KEY_ENV} is not set; a YouTube Data API key is required.")
        return cls(
            api_key=key,
            api_base=_env_str("YOUTUBE_API_BASE") or DEFAULT_API_BASE,
            timeout=_env_float("YOUTUBE_TIMEOUT") or 10.0,
            max_qps=_env_float("YOUTUBE_MAX_QPS"),
            concurrent_batches=_env_int("YOUTUBE_CONCURRENT_BATCHES") or 1,
        )
