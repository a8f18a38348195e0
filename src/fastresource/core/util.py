from __future__ import annotations
import base64
from typing import Dict, Any
from .model import ReadResult


def result_asdict(res: ReadResult, *, exists: bool | None = None) -> Dict[str, Any]:
    """Return a JSON-serialisable dict for one read."""
    payload: Dict[str, Any] = {"path": res.path}
    if exists is not None:
        payload["exists"] = exists
    if not res.success or res.data is None:
        payload.update({"success": False, "error": str(res.error) if res.error else None})
        return payload
    if isinstance(res.data, bytes):
        payload["bytes_b64"] = base64.b64encode(res.data).decode("ascii")
    else:
        payload["text"] = res.data
    payload.update({"success": True, "size": len(res.data)})
    return payload
