"""Protocol repository (implemented for SQLAlchemy and for plain text history files)"""

from typing import Protocol

from fenboard.core.models import HistoryModel


class HistoryRepository(Protocol):
    """Persistence layer orchestration. Histories are stored under a name."""

    def get_history(self, name: str) -> HistoryModel | None:
        """Get history by name, if record exists."""
        ...

    def save_history(self, name: str, history: HistoryModel) -> HistoryModel:
        """Create or overwrite the record and return what got stored."""
        ...

    def delete_history(self, name: str) -> HistoryModel | None:
        """Remove a history's record."""
        ...
