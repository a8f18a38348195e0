"""Environment-driven settings for fastresource."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional
import os

RUNTIME_CHOICES = ("auto", "server", "browser")


@dataclass(frozen=True)
class Settings:
    """Per-resource knobs read from ``FASTRESOURCE_*`` environment variables.

    The runtime override is process-wide and lives outside this class, see
    :func:`runtime_from_env`.
    """

    base_url: Optional[str] = None
    timeout: Optional[float] = None  # None blocks until the host completes
    log_level: str = "WARNING"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Settings":
        timeout_raw = data.get("FASTRESOURCE_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw not in (None, "") else None
        except ValueError as exc:
            raise ValueError(f"FASTRESOURCE_TIMEOUT is not a number: {timeout_raw!r}") from exc

        return cls(
            base_url=data.get("FASTRESOURCE_BASE_URL") or None,
            timeout=timeout,
            log_level=log_level_from_env(data),
        )


def load_settings(environ: Mapping[str, Any] | None = None) -> Settings:
    return Settings.from_mapping(os.environ if environ is None else environ)


def runtime_from_env(environ: Mapping[str, Any] | None = None) -> str:
    """Return the ``FASTRESOURCE_RUNTIME`` override: auto, server or browser."""
    data = os.environ if environ is None else environ
    runtime = str(data.get("FASTRESOURCE_RUNTIME", "auto")).strip().lower() or "auto"
    if runtime not in RUNTIME_CHOICES:
        raise ValueError(
            f"FASTRESOURCE_RUNTIME must be one of {', '.join(RUNTIME_CHOICES)}, got {runtime!r}"
        )
    return runtime


def log_level_from_env(environ: Mapping[str, Any] | None = None) -> str:
    data = os.environ if environ is None else environ
    return str(data.get("FASTRESOURCE_LOG_LEVEL", "WARNING")).upper()
