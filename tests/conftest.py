"""
Pytest will auto-discover / import this file called 'conftest.py'.
Fixtures shared by the persistence tests: an in-memory database and both history repositories.
"""

from pathlib import Path
from typing import Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from fenboard.core.models import HistoryModel
from fenboard.db.schema import Base
from fenboard.db.sql_repository import SQLHistoryRepository
from fenboard.db.text_file_repository import TextFileHistoryRepository

# StaticPool: every session shares one connection, and so one in-memory database
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)

# e2e4 e7e5 from the standard starting position
SAMPLE_FENS = [
    "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
    "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
    "rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR w KQkq e6 0 1",
]


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Tables are created per test and dropped at teardown, so repository tests do not see each other's records."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def sql_history_repo(db_session_repo: Session) -> SQLHistoryRepository:
    return SQLHistoryRepository(db_session_repo)


@pytest.fixture
def text_history_repo(tmp_path: Path) -> TextFileHistoryRepository:
    return TextFileHistoryRepository(tmp_path)


@pytest.fixture
def sample_history() -> HistoryModel:
    """Three plies, cursor on the last one"""
    return HistoryModel(fens=list(SAMPLE_FENS), cursor=len(SAMPLE_FENS) - 1)
