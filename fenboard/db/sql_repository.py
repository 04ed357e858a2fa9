"""Implementation of (History)Repository using SQLAlchemy"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from fenboard.core.models import HistoryModel
from fenboard.db.schema import DBHistory


class SQLHistoryRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_history(self, name: str) -> HistoryModel | None:
        """Get history by name, if record exists."""
        history_db = self._fetch_history(name)
        if history_db:
            return self._to_model(history_db)
        return None

    def save_history(self, name: str, history: HistoryModel) -> HistoryModel:
        """Create a new record, or overwrite the existing one with the same name."""
        history_db = self._fetch_history(name)
        if history_db is None:
            history_db = DBHistory(name=name)
            self.db.add(history_db)
        # assign a fresh list, so the JSON column registers the change
        history_db.fens = list(history.fens)
        history_db.cursor = history.cursor
        self.db.commit()
        self.db.refresh(history_db)
        return self._to_model(history_db)

    def delete_history(self, name: str) -> HistoryModel | None:
        """Remove a history's record."""
        history_db = self._fetch_history(name)
        if not history_db:
            return None
        history_model = self._to_model(history_db)
        self.db.delete(history_db)
        self.db.commit()
        return history_model

    def _fetch_history(self, name: str) -> DBHistory | None:
        query = select(DBHistory).where(DBHistory.name == name)
        return self.db.scalar(query)

    def _to_model(self, history_db: DBHistory) -> HistoryModel:
        """Convert SQLAlchemy model to data transfer model."""
        return HistoryModel(fens=list(history_db.fens), cursor=history_db.cursor)
