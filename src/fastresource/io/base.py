"""Base protocols for the resource readers."""

from typing import Protocol, runtime_checkable

from ..core.model import ReadResult


@runtime_checkable
class ResourceReader(Protocol):
    """Protocol for synchronous resource readers."""

    path: str

    def exists(self) -> bool:
        """Return whether the resource is readable right now. Never raises."""
        ...

    def read_text(self) -> ReadResult:
        """Read the whole resource as UTF-8 text."""
        ...

    def read_bytes(self) -> ReadResult:
        """Read the whole resource as raw bytes."""
        ...


@runtime_checkable
class AsyncResourceReader(Protocol):
    """Protocol for asynchronous resource readers."""

    path: str

    async def exists(self) -> bool:
        ...

    async def read_text(self) -> ReadResult:
        ...

    async def read_bytes(self) -> ReadResult:
        ...


class BlockingAsyncResourceReader:
    """Async facade that runs a sync reader inline on the event loop.

    Used on WebAssembly, where there are no worker threads for
    ``asyncio.to_thread`` and httpx has no transport.
    """

    def __init__(self, reader: ResourceReader):
        self._sync_reader = reader

    @property
    def path(self) -> str:
        return self._sync_reader.path

    async def exists(self) -> bool:
        return self._sync_reader.exists()

    async def read_text(self) -> ReadResult:
        return self._sync_reader.read_text()

    async def read_bytes(self) -> ReadResult:
        return self._sync_reader.read_bytes()
