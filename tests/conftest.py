"""Shared fixtures for the passmgr test suite."""

from __future__ import annotations

import pytest

from passmgr.config import reset_config
from passmgr.crypto import kdf


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove PASSMGR_* variables and the cached config between tests."""
    for key in [
        "PASSMGR_VAULT",
        "PASSMGR_UPDATE_URL",
        "PASSMGR_UPDATE_TIMEOUT",
        "PASSMGR_LOG_LEVEL",
    ]:
        monkeypatch.delenv(key, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def fast_kdf(monkeypatch):
    """Cheapest valid Argon2id costs, for tests that derive keys hundreds of times."""
    monkeypatch.setattr(kdf, "TIME_COST", 1)
    monkeypatch.setattr(kdf, "MEMORY_COST_KiB", 8)
    monkeypatch.setattr(kdf, "PARALLELISM", 1)


@pytest.fixture
def zero_salt() -> bytes:
    return bytes(16)
