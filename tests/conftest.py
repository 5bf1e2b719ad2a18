"""Shared fixtures for the worms test suite."""

from __future__ import annotations

import math

import pytest
import structlog

from worms.config import reset_settings
from worms.model.worm import Worm


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Start every test from default settings and default structlog config."""
    monkeypatch.delenv("WORMS_CHECK_PRECONDITIONS", raising=False)
    monkeypatch.delenv("WORMS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("WORMS_LOG_JSON", raising=False)
    reset_settings()
    yield
    reset_settings()
    structlog.reset_defaults()


@pytest.fixture
def sander() -> Worm:
    """Upright worm with a single action point."""
    return Worm("Sander", 0, 0, math.pi / 2, 1, 1)


@pytest.fixture
def mover() -> Worm:
    """Worm at orientation 1 rad with plenty of action points."""
    return Worm("Mover", 0, 0, 1, 1, 4000)


@pytest.fixture
def stander() -> Worm:
    """Worm facing straight down."""
    return Worm("Sad crying worm", 0, 0, 3 * math.pi / 2, 1, 4000)
