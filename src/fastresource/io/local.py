"""Local filesystem readers."""

import asyncio
import logging
import os
from pathlib import Path

from ..core.model import ReadResult

logger = logging.getLogger(__name__)


class LocalResourceReader:
    """Synchronous reader backed by the host filesystem."""

    def __init__(self, path: str):
        self.path = path
        self.requests_made = 0

    def exists(self) -> bool:
        try:
            return os.path.exists(self.path) and os.access(self.path, os.R_OK)
        except (OSError, ValueError):
            # e.g. embedded NUL bytes in the path
            return False

    def read_text(self) -> ReadResult:
        self.requests_made += 1
        try:
            data = Path(self.path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError, ValueError) as e:
            logger.debug("read_text failed for %s: %s", self.path, e)
            return ReadResult.failed(self.path, cause=e)
        return ReadResult.ok(self.path, data)

    def read_bytes(self) -> ReadResult:
        self.requests_made += 1
        try:
            data = Path(self.path).read_bytes()
        except (OSError, ValueError) as e:
            logger.debug("read_bytes failed for %s: %s", self.path, e)
            return ReadResult.failed(self.path, cause=e)
        return ReadResult.ok(self.path, data)


class LocalAsyncResourceReader:
    """Asynchronous local reader - thin wrapper around the sync reader."""

    def __init__(self, path: str):
        self._sync_reader = LocalResourceReader(path)

    @property
    def path(self) -> str:
        return self._sync_reader.path

    @property
    def requests_made(self) -> int:
        return self._sync_reader.requests_made

    async def exists(self) -> bool:
        return await asyncio.to_thread(self._sync_reader.exists)

    async def read_text(self) -> ReadResult:
        return await asyncio.to_thread(self._sync_reader.read_text)

    async def read_bytes(self) -> ReadResult:
        return await asyncio.to_thread(self._sync_reader.read_bytes)


def open_local_reader(path: str) -> LocalResourceReader:
    """Create a synchronous local resource reader."""
    return LocalResourceReader(path)


def open_local_reader_async(path: str) -> LocalAsyncResourceReader:
    """Create an asynchronous local resource reader."""
    return LocalAsyncResourceReader(path)
