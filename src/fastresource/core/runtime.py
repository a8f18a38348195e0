"""Runtime detection: does this process have a host filesystem to read from?"""
from __future__ import annotations

import logging
import sys
from typing import Any, Optional

from .config import runtime_from_env

logger = logging.getLogger(__name__)

# Computed on first use, never reset.
_HAS_SERVER_CAPABILITY: Optional[bool] = None


def _node_version(process: Any) -> Optional[str]:
    versions = getattr(process, "versions", None) if process is not None else None
    node = getattr(versions, "node", None) if versions is not None else None
    return str(node) if node else None


def is_wasm() -> bool:
    """True on a WebAssembly (Pyodide) interpreter: no threads, no sockets."""
    return sys.platform == "emscripten"


def _detect_server_capability(runtime: str = "auto") -> bool:
    if runtime != "auto":
        return runtime == "server"

    if not is_wasm():
        return True

    # WebAssembly build: only a Node host gives us a filesystem.
    try:
        import js  # type: ignore[import-not-found]
    except ImportError:
        return False

    if _node_version(getattr(js, "process", None)):
        return True
    window = getattr(js, "window", None)
    return _node_version(getattr(window, "process", None)) is not None


def has_server_capability() -> bool:
    """Return True when resources should be read from the host filesystem."""
    global _HAS_SERVER_CAPABILITY
    if _HAS_SERVER_CAPABILITY is None:
        runtime = runtime_from_env()
        _HAS_SERVER_CAPABILITY = _detect_server_capability(runtime)
        logger.debug("runtime=%s platform=%s server_capability=%s",
                     runtime, sys.platform, _HAS_SERVER_CAPABILITY)
    return _HAS_SERVER_CAPABILITY
