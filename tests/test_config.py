"""Tests for settings and logging configuration."""

from __future__ import annotations

import io
import json
import math

import pytest

from worms.config import Settings, get_settings, reset_settings
from worms.log_config import configure_logging
from worms.model.worm import Worm


def test_settings_defaults():
    settings = Settings()
    assert settings.check_preconditions is True
    assert settings.log_level == "info"
    assert settings.log_json is False


def test_settings_env_override(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WORMS_CHECK_PRECONDITIONS", "false")
    monkeypatch.setenv("WORMS_LOG_LEVEL", "debug")

    settings = Settings()

    assert settings.check_preconditions is False
    assert settings.log_level == "debug"


def test_get_settings_is_singleton():
    assert get_settings() is get_settings()


def test_reset_settings_rereads_environment(monkeypatch: pytest.MonkeyPatch):
    assert get_settings().check_preconditions is True

    monkeypatch.setenv("WORMS_CHECK_PRECONDITIONS", "false")
    reset_settings()

    assert get_settings().check_preconditions is False


def test_worm_uses_settings_for_preconditions(monkeypatch: pytest.MonkeyPatch):
    """Test that disabling checks via the environment turns them into assertions."""
    monkeypatch.setenv("WORMS_CHECK_PRECONDITIONS", "false")
    reset_settings()

    worm = Worm("Sander", 0, 0, math.pi / 2, 1, 1)

    with pytest.raises(AssertionError):
        worm.turn(1)


def test_configure_logging_json():
    stream = io.StringIO()
    configure_logging(Settings(log_level="debug", log_json=True), stream)

    worm = Worm("Logger", 0, 0, 0, 1, 100)
    worm.move(3)

    lines = [json.loads(line) for line in stream.getvalue().splitlines()]
    events = [line["event"] for line in lines]
    assert "worm_created" in events
    assert "worm_moved" in events
    moved = lines[events.index("worm_moved")]
    assert moved["level"] == "debug"
    assert moved["steps"] == 3
    assert moved["cost"] == 3


def test_configure_logging_filters_below_level():
    stream = io.StringIO()
    configure_logging(Settings(log_level="warning"), stream)

    worm = Worm("Quiet", 0, 0, 0, 1, 100)
    worm.move(3)
    with pytest.raises(ValueError):
        worm.move(-1)

    assert stream.getvalue() == ""


def test_configure_logging_defaults_to_global_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("WORMS_LOG_LEVEL", "info")
    monkeypatch.setenv("WORMS_LOG_JSON", "true")
    reset_settings()
    stream = io.StringIO()
    configure_logging(stream=stream)

    worm = Worm("Rejected", 0, 0, 0, 1, 0)
    with pytest.raises(ValueError):
        worm.jump()

    lines = [json.loads(line) for line in stream.getvalue().splitlines()]
    assert [line["event"] for line in lines] == ["jump_rejected"]
    assert lines[0]["reason"] == "no_action_points"
