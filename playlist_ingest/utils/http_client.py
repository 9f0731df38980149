"""Shared HTTP helpers for the YouTube Data API."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import aiohttp

from ..errors import AuthenticationError, MissingCredentialError, TransportError
from .settings import DEFAULT_API_BASE, IngestSettings

API_HEADERS: Dict[str, str] = {
    "accept": "application/json",
    "user-agent": "playlist-ingest/0.1 (+aiohttp)",
}

Params = Dict[str, Any]


def _describe_error(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict):
        return error.get("message") or error.get("status")
    if isinstance(error, str):
        return error
    return None


class HttpClient:
    """Issues credential-bearing GET requests against the Data API."""

    def __init__(
        self,
        api_key: str,
        timeout: float = 10.0,
        api_base: str = DEFAULT_API_BASE,
        max_qps: Optional[float] = None,
    ) -> None:
        if not api_key:
            raise MissingCredentialError("A YouTube Data API key is required to build an HttpClient.")
        self.api_key = api_key
        self.timeout = timeout
        self.api_base = api_base if api_base.endswith("/") else f"{api_base}/"
        self._min_api_interval = 1.0 / max_qps if max_qps else 0.0
        self._last_api_call = 0.0
        self._pace_lock: Optional[asyncio.Lock] = None

        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop: Optional[asyncio.AbstractEventLoop] = None

    @classmethod
    def from_settings(cls, settings: IngestSettings) -> "HttpClient":
        return cls(
            api_key=settings.api_key,
            timeout=settings.timeout,
            api_base=settings.api_base,
            max_qps=settings.max_qps,
        )

    async def get_json(self, resource: str, params: Params) -> Dict[str, Any]:
        """GET ``resource`` with ``params`` (plus the key) and decode the JSON body."""

        await self._enforce_api_rate_limit()
        url = urljoin(self.api_base, resource.lstrip("/"))
        query = {key: value for key, value in params.items() if value is not None}
        query["key"] = self.api_key

        session = await self._get_session()
        try:
            async with session.get(url, params=query) as response:
                status = response.status
                try:
                    payload = await response.json(content_type=None)
                except (aiohttp.ContentTypeError, ValueError):
                    payload = None
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logging.error("HTTP GET to %s failed: %s", url, exc)
            raise TransportError(f"Request to {resource} failed: {exc}", url=url) from exc

        if status in {401, 403}:
            detail = _describe_error(payload) or "request rejected"
            logging.error("YouTube API rejected the request (status %s): %s", status, detail)
            raise AuthenticationError(f"YouTube API rejected the key: {detail}", status=status, url=url)

        if not 200 <= status < 300:
            detail = _describe_error(payload) or "no error detail"
            logging.error("YouTube API request to %s failed with status %s: %s", resource, status, detail)
            raise TransportError(f"{resource} returned HTTP {status}: {detail}", status=status, url=url)

        if not isinstance(payload, dict):
            raise TransportError(f"{resource} returned a non-JSON body", status=status, url=url)
        return payload

    async def _enforce_api_rate_limit(self) -> None:
        if not self._min_api_interval:
            return
        if self._pace_lock is None:
            self._pace_lock = asyncio.Lock()
        async with self._pace_lock:
            elapsed = time.monotonic() - self._last_api_call
            if elapsed < self._min_api_interval:
                await asyncio.sleep(self._min_api_interval - elapsed)
            self._last_api_call = time.monotonic()

    async def _get_session(self) -> aiohttp.ClientSession:
        current_loop = asyncio.get_running_loop()
        if self._session and (self._session.closed or self._session_loop is not current_loop):
            await self._shutdown_session()
            self._pace_lock = None
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers=API_HEADERS.copy(),
            )
            self._session_loop = current_loop
        return self._session

    async def _shutdown_session(self) -> None:
        if self._session and not self._session.closed:
            try:
                await self._session.close()
            except Exception as exc:
                logging.debug("Closing stale HTTP session failed: %s", exc)
        self._session = None
        self._session_loop = None

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None
        self._session_loop = None

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.close()
