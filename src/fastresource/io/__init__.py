"""I/O layer for fastresource - one reader per runtime."""

import logging

# Re-export these for import convenience
from .base import ResourceReader, AsyncResourceReader, BlockingAsyncResourceReader
from .local import open_local_reader, open_local_reader_async
from .http_sync import open_http_reader
from .http_async import open_http_reader_async, close_global_client
from ..core.config import Settings, load_settings
from ..core.runtime import has_server_capability, is_wasm

logger = logging.getLogger(__name__)


def open_resource_reader(path: str, settings: Settings | None = None):
    """Factory: build the ResourceReader matching the current runtime."""
    if has_server_capability():
        logger.debug("local reader for %s", path)
        return open_local_reader(path)
    settings = settings or load_settings()
    logger.debug("http reader for %s (base_url=%s)", path, settings.base_url)
    return open_http_reader(path, base_url=settings.base_url, timeout=settings.timeout)


def open_resource_reader_async(path: str, settings: Settings | None = None):
    """Factory: build the AsyncResourceReader matching the current runtime."""
    if is_wasm():
        logger.debug("blocking async reader for %s", path)
        return BlockingAsyncResourceReader(open_resource_reader(path, settings))
    if has_server_capability():
        return open_local_reader_async(path)
    settings = settings or load_settings()
    return open_http_reader_async(path, base_url=settings.base_url, timeout=settings.timeout)
