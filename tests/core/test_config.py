"""Unit tests for fenboard/core/config.py"""

import logging
from typing import Generator
from unittest.mock import patch

import pytest

from fenboard.core.config import (
    STANDARD_STARTING_FEN,
    Settings,
    configure_logging,
    get_settings,
)
from fenboard.core.exceptions import (
    ChessError,
    HistoryIoError,
    InvalidMoveError,
    InvalidRequestError,
    MalformedFenError,
    NavigationOutOfRange,
    RepositoryError,
)


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """No FENBOARD_ variables from the surrounding shell, and no cached Settings leaking between tests"""
    for name in ("STARTING_FEN", "HISTORY_FILE", "DATABASE_URL", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(f"FENBOARD_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(clean_settings: None) -> None:
    settings = Settings(_env_file=None)
    assert settings.starting_fen == STANDARD_STARTING_FEN
    assert settings.history_file == "chess_history.txt"
    assert settings.log_level == "INFO"


def test_environment_overrides(clean_settings: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FENBOARD_HISTORY_FILE", "games.txt")
    monkeypatch.setenv("FENBOARD_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.history_file == "games.txt"
    assert settings.log_level == "debug"


def test_settings_are_cached(clean_settings: None) -> None:
    assert get_settings() is get_settings()


def test_configure_logging(clean_settings: None) -> None:
    settings = Settings(_env_file=None, log_level="debug")
    with patch.object(logging, "basicConfig") as basic_config:
        configure_logging(settings)
    basic_config.assert_called_once_with(level="DEBUG", format=settings.log_format)


@pytest.mark.parametrize(
    "error",
    [
        InvalidMoveError,
        MalformedFenError,
        NavigationOutOfRange,
        HistoryIoError,
        RepositoryError,
        InvalidRequestError,
    ],
)
def test_errors_share_a_base_class(error: type[Exception]) -> None:
    assert issubclass(error, ChessError)


def test_request_error_is_not_a_value_error() -> None:
    """pydantic only wraps ValueError/AssertionError into a ValidationError"""
    assert not issubclass(InvalidRequestError, ValueError)
