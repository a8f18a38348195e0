"""The Resource facade: one path, read from disk or over HTTP."""

from __future__ import annotations

from typing import Optional

from .core.config import Settings, load_settings
from .core.model import ReadResult
from .core.runtime import has_server_capability
from .io import open_resource_reader, open_resource_reader_async
from .io.base import AsyncResourceReader, ResourceReader


class Resource:
    """A readable target identified by an immutable path.

    The reader is picked from the process-wide runtime capability the first
    time it is needed; the other variant is never built. Every call performs
    fresh I/O, nothing is cached between calls.

    Configuration is resolved here, so a bad ``FASTRESOURCE_*`` value raises
    ValueError at construction rather than from ``exists()`` or a read.
    """

    def __init__(self, path: str, *, settings: Optional[Settings] = None):
        self._path = str(path)
        self._settings = settings if settings is not None else load_settings()
        has_server_capability()
        self._reader: Optional[ResourceReader] = None
        self._async_reader: Optional[AsyncResourceReader] = None

    @property
    def path(self) -> str:
        return self._path

    def __repr__(self) -> str:
        return f"Resource({self._path!r})"

    def _get_reader(self) -> ResourceReader:
        if self._reader is None:
            self._reader = open_resource_reader(self._path, self._settings)
        return self._reader

    def _get_async_reader(self) -> AsyncResourceReader:
        if self._async_reader is None:
            self._async_reader = open_resource_reader_async(self._path, self._settings)
        return self._async_reader

    def exists(self) -> bool:
        return self._get_reader().exists()

    def try_read_text(self) -> ReadResult:
        return self._get_reader().read_text()

    def try_read_bytes(self) -> ReadResult:
        return self._get_reader().read_bytes()

    def read_text(self) -> str:
        """Return the whole content decoded as UTF-8; raise FileReadError on failure."""
        return self.try_read_text().unwrap()

    def read_bytes(self) -> bytes:
        """Return the exact raw content; raise FileReadError on failure."""
        return self.try_read_bytes().unwrap()

    async def exists_async(self) -> bool:
        return await self._get_async_reader().exists()

    async def try_read_text_async(self) -> ReadResult:
        return await self._get_async_reader().read_text()

    async def try_read_bytes_async(self) -> ReadResult:
        return await self._get_async_reader().read_bytes()

    async def read_text_async(self) -> str:
        return (await self.try_read_text_async()).unwrap()

    async def read_bytes_async(self) -> bytes:
        return (await self.try_read_bytes_async()).unwrap()
