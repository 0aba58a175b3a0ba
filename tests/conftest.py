"""Shared pytest fixtures and configuration."""

from __future__ import annotations

import os
from collections.abc import Generator

import pytest

from smartenum import get_settings, registry


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test with default settings and an empty discovery cache."""
    for key in list(os.environ):
        if key.upper().startswith("SMARTENUM_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    registry.invalidate()
    yield
    get_settings.cache_clear()
    registry.invalidate()
