import pytest

from fastresource.core import runtime


@pytest.fixture
def server_runtime(monkeypatch):
    """Pretend the process has a host filesystem."""
    monkeypatch.setattr(runtime, "_HAS_SERVER_CAPABILITY", True)


@pytest.fixture
def browser_runtime(monkeypatch):
    """Pretend the process runs inside a browser page."""
    monkeypatch.setattr(runtime, "_HAS_SERVER_CAPABILITY", False)
