"""fastresource - read a path as text or bytes, from disk or over HTTP."""

from .core.model import FileReadError, ReadResult                     # re-export
from .core.runtime import has_server_capability
from .resource import Resource


def exists(path: str) -> bool:
    """Return whether `path` is currently readable."""
    return Resource(path).exists()


def read_text(path: str) -> str:
    """Read `path` as UTF-8 text, raising FileReadError on failure."""
    return Resource(path).read_text()


def read_bytes(path: str) -> bytes:
    """Read `path` as raw bytes, raising FileReadError on failure."""
    return Resource(path).read_bytes()


__all__ = [
    "Resource", "exists", "read_text", "read_bytes",
    "FileReadError", "ReadResult", "has_server_capability",
]
