"""Application settings, read from environment variables prefixed with FENBOARD_ (or a .env file)"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

STANDARD_STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FENBOARD_", env_file=".env", extra="ignore"
    )

    starting_fen: str = STANDARD_STARTING_FEN
    # newline-delimited FEN history, one snapshot per ply
    history_file: str = "chess_history.txt"
    database_url: str = "sqlite:///fenboard.db"
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Called once by the front end at startup. Library modules only create loggers, they never add handlers."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=settings.log_format,
    )
