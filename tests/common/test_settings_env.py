from __future__ import annotations

import logging

import pytest

from common import settings
from common.env import env_bool, env_str
from common.interp import lerp, stagger_factor
from common.logging import setup_default_logging


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("0", False), ("true", True), ("Off", False), ("yes", True), ("maybe", False)],
)
def test_env_bool(monkeypatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("LQG_TEST_FLAG", raw)
    assert env_bool("LQG_TEST_FLAG", False) is expected


def test_env_bool_and_str_defaults(monkeypatch) -> None:
    monkeypatch.delenv("LQG_TEST_FLAG", raising=False)
    assert env_bool("LQG_TEST_FLAG", True) is True
    monkeypatch.setenv("LQG_TEST_STR", "   ")
    assert env_str("LQG_TEST_STR", "fallback") == "fallback"
    monkeypatch.setenv("LQG_TEST_STR", " debug ")
    assert env_str("LQG_TEST_STR", "fallback") == "debug"


def test_settings_reload(monkeypatch) -> None:
    assert settings.get().DISABLE_ANIMATION is False
    assert settings.get().LOG_LEVEL == "INFO"
    monkeypatch.setenv("LQG_DISABLE_ANIMATION", "on")
    monkeypatch.setenv("LQG_LOG_LEVEL", "debug")
    settings.reload_from_env()
    assert settings.get().DISABLE_ANIMATION is True
    assert settings.get().LOG_LEVEL == "DEBUG"


def test_setup_default_logging_is_noop_when_configured(monkeypatch) -> None:
    root = logging.getLogger()
    handler = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [handler])
    setup_default_logging("DEBUG")
    assert root.handlers == [handler]


def test_lerp_and_stagger_factor() -> None:
    assert lerp(56.0, 64.0, 0.0) == 56.0
    assert lerp(56.0, 64.0, 1.0) == 64.0
    assert lerp(0.6, 0.3, 0.5) == pytest.approx(0.45)
    assert stagger_factor(0, 1) == 0.0
    assert stagger_factor(0, 0) == 0.0
    assert stagger_factor(2, 5) == 0.5
    assert stagger_factor(4, 5) == 1.0
