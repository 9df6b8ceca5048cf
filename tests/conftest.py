"""Shared fixtures."""

from __future__ import annotations

import pytest

from baseerror.config import cfg
from baseerror.config.schema import _ENV_OVERRIDE_KEYS


@pytest.fixture
def clean_settings(monkeypatch):
    """Global settings with no env overrides; restored to defaults afterwards."""
    for key in _ENV_OVERRIDE_KEYS:
        monkeypatch.delenv(key, raising=False)
    cfg.reload({})
    yield cfg
    monkeypatch.undo()
    cfg.reload({}, validate=False)
