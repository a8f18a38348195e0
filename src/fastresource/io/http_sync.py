"""Synchronous HTTP resource reader using requests."""

import logging
import requests
from typing import Optional
from urllib.parse import urljoin

from ..core.model import ReadResult

logger = logging.getLogger(__name__)

# Body charset that maps every byte 0x00-0xFF to exactly one code point.
BINARY_TEXT_ENCODING = "latin-1"


# Module-level session for connection pooling
_session = None


def _get_session():
    """Get or create the global requests session."""
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


def resolve_url(path: str, base_url: Optional[str]) -> str:
    """Join `path` onto the configured origin, if any."""
    return urljoin(base_url, path) if base_url else path


def _is_success(status_code: int) -> bool:
    return 200 <= status_code <= 299


def _binary_string_to_bytes(text: str) -> bytes:
    """Turn a one-char-per-byte string back into the bytes it came from."""
    return bytes(ord(ch) & 0xFF for ch in text)


class HTTPResourceReader:
    """Synchronous HTTP resource reader; one blocking GET per call."""

    def __init__(self, path: str, *, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.path = path
        self.url = resolve_url(path, base_url)
        self.timeout = timeout
        self.requests_made = 0
        self._session = _get_session()

    def _get(self) -> requests.Response:
        self.requests_made += 1
        logger.debug("GET %s", self.url)
        return self._session.get(self.url, timeout=self.timeout)

    def exists(self) -> bool:
        try:
            response = self._get()
        except (requests.RequestException, ValueError) as e:
            logger.debug("GET %s failed: %s", self.url, e)
            return False
        return _is_success(response.status_code)

    def read_text(self) -> ReadResult:
        try:
            response = self._get()
        except (requests.RequestException, ValueError) as e:
            return ReadResult.failed(self.path, cause=e)

        if not _is_success(response.status_code):
            return ReadResult.failed(self.path, status=f"{response.status_code} {response.reason}")

        response.encoding = "utf-8"
        return ReadResult.ok(self.path, response.text)

    def read_bytes(self) -> ReadResult:
        try:
            response = self._get()
        except (requests.RequestException, ValueError) as e:
            return ReadResult.failed(self.path, cause=e)

        if not _is_success(response.status_code):
            return ReadResult.failed(self.path, status=f"{response.status_code} {response.reason}")

        response.encoding = BINARY_TEXT_ENCODING
        return ReadResult.ok(self.path, _binary_string_to_bytes(response.text))


def open_http_reader(path: str, *, base_url: Optional[str] = None,
                     timeout: Optional[float] = None) -> HTTPResourceReader:
    """Create a synchronous HTTP resource reader."""
    return HTTPResourceReader(path, base_url=base_url, timeout=timeout)
