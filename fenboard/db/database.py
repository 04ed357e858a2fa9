"""Generate database session"""

from typing import Generator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from fenboard.core.config import get_settings
from fenboard.db.schema import Base


def create_db_engine(database_url: Optional[str] = None) -> Engine:
    return create_engine(database_url or get_settings().database_url)


def init_db(engine: Engine) -> None:
    """Ensure all tables are created"""
    Base.metadata.create_all(bind=engine)


def get_db(engine: Optional[Engine] = None) -> Generator[Session, None, None]:
    engine = engine or create_db_engine()
    init_db(engine)
    db = sessionmaker(bind=engine)()
    try:
        yield db
    finally:
        db.close()
