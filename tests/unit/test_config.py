"""Unit tests for primkit.config."""

import logging

import pytest

from primkit import config
from primkit.errors import InvalidLogLevelError


def test_unset_uses_default(monkeypatch):
    """Without PRIMKIT_LOG_LEVEL the default level applies."""
    monkeypatch.delenv(config.LOG_LEVEL_ENV_VAR, raising=False)
    assert config.get_log_level() == config.DEFAULT_LOG_LEVEL == logging.WARNING


def test_empty_uses_default(monkeypatch):
    """A blank value counts as unset."""
    monkeypatch.setenv(config.LOG_LEVEL_ENV_VAR, "  ")
    assert config.get_log_level() == config.DEFAULT_LOG_LEVEL


@pytest.mark.parametrize(
    "raw, expected",
    [("DEBUG", logging.DEBUG), ("info", logging.INFO), (" Error ", logging.ERROR)],
)
def test_level_names_are_case_insensitive(monkeypatch, raw, expected):
    """Level names are parsed case-insensitively and trimmed."""
    monkeypatch.setenv(config.LOG_LEVEL_ENV_VAR, raw)
    assert config.get_log_level() == expected


def test_unknown_level_raises(monkeypatch):
    """An unknown level name raises InvalidLogLevelError."""
    monkeypatch.setenv(config.LOG_LEVEL_ENV_VAR, "loud")
    with pytest.raises(InvalidLogLevelError, match="Invalid log level: loud"):
        config.get_log_level()
