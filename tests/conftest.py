"""Shared fixtures for the tradelog-analytics test suite."""

from __future__ import annotations

import pytest

from tradelog_analytics.core.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from any TRADELOG_* environment."""
    return Settings()


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for key in ("TRADELOG_ANALYTICS__PAGE_SIZE", "TRADELOG_ANALYTICS__REPORT_TIMEZONE"):
        monkeypatch.delenv(key, raising=False)
