"""Asynchronous HTTP resource reader using httpx."""

import logging
import httpx
from typing import Optional

from ..core.model import ReadResult
from .http_sync import BINARY_TEXT_ENCODING, _binary_string_to_bytes, _is_success, resolve_url

logger = logging.getLogger(__name__)


# Global async client
_client: Optional[httpx.AsyncClient] = None


def _get_client() -> httpx.AsyncClient:
    """Get or create the global httpx AsyncClient."""
    global _client
    if _client is None:
        _client = httpx.AsyncClient(timeout=None)
    return _client


class HTTPAsyncResourceReader:
    """Asynchronous HTTP resource reader; one GET per call."""

    def __init__(self, path: str, *, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.path = path
        self.url = resolve_url(path, base_url)
        self.timeout = timeout
        self.requests_made = 0

    async def _get(self) -> httpx.Response:
        self.requests_made += 1
        logger.debug("GET %s", self.url)
        return await _get_client().get(self.url, timeout=self.timeout)

    async def exists(self) -> bool:
        try:
            response = await self._get()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("GET %s failed: %s", self.url, e)
            return False
        return _is_success(response.status_code)

    async def read_text(self) -> ReadResult:
        try:
            response = await self._get()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return ReadResult.failed(self.path, cause=e)

        if not _is_success(response.status_code):
            return ReadResult.failed(self.path, status=f"{response.status_code} {response.reason_phrase}")

        response.encoding = "utf-8"
        return ReadResult.ok(self.path, response.text)

    async def read_bytes(self) -> ReadResult:
        try:
            response = await self._get()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return ReadResult.failed(self.path, cause=e)

        if not _is_success(response.status_code):
            return ReadResult.failed(self.path, status=f"{response.status_code} {response.reason_phrase}")

        response.encoding = BINARY_TEXT_ENCODING
        return ReadResult.ok(self.path, _binary_string_to_bytes(response.text))


def open_http_reader_async(path: str, *, base_url: Optional[str] = None,
                           timeout: Optional[float] = None) -> HTTPAsyncResourceReader:
    """Create an asynchronous HTTP resource reader."""
    return HTTPAsyncResourceReader(path, base_url=base_url, timeout=timeout)


async def close_global_client():
    """Close the global httpx client. Call this at application shutdown."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None
