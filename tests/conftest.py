"""Pytest configuration and fixtures.

Provides environment isolation and logging capture. Fixtures here are
autouse unless noted.
"""

from __future__ import annotations

import logging
import os

import pytest

from tests.helpers import FakeLegacyAPI

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_flag_env(monkeypatch):
    """Clear TUPLERESULT_* flags so each test starts from the defaults."""
    for key in list(os.environ.keys()):
        if key.startswith("TUPLERESULT_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def legacy_api() -> FakeLegacyAPI:
    """Return a tuple-style API double that succeeds with ``1`` by default."""
    return FakeLegacyAPI()


@pytest.fixture
def tupleresult_logs(caplog):
    """Capture records from the ``tupleresult`` logger hierarchy at DEBUG."""
    caplog.set_level(logging.DEBUG, logger="tupleresult")
    return caplog
