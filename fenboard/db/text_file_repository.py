"""
Implementation of (History)Repository using plain text files.

History file format: one FEN string per line, in play order. No header, no metadata.
The cursor is not stored: a loaded history always points at its last entry.
"""

import logging
from pathlib import Path

from fenboard.core.exceptions import HistoryIoError
from fenboard.core.models import HistoryModel

_LOGGER = logging.getLogger(__name__)


class TextFileHistoryRepository:
    def __init__(self, base_dir: Path | str, encoding: str = "utf-8") -> None:
        self.base_dir = Path(base_dir)
        self.encoding = encoding

    def get_history(self, name: str) -> HistoryModel | None:
        """Read the file `name` in the base directory. None if there is no such file."""
        path = self._path(name)
        if not path.is_file():
            return None
        try:
            lines = path.read_text(encoding=self.encoding).splitlines()
        except OSError as error:
            _LOGGER.warning("Could not read history file %s: %s", path, error)
            raise HistoryIoError(f"Error importing history: {error}") from error

        fens = [line.strip() for line in lines if line.strip()]
        return HistoryModel(fens=fens, cursor=len(fens) - 1)

    def save_history(self, name: str, history: HistoryModel) -> HistoryModel:
        """Write (truncating any existing file) one FEN per line."""
        path = self._path(name)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(
                "".join(f"{fen}\n" for fen in history.fens), encoding=self.encoding
            )
        except OSError as error:
            _LOGGER.warning("Could not write history file %s: %s", path, error)
            raise HistoryIoError(f"Error exporting history: {error}") from error

        _LOGGER.info("History exported to %s (%d entries)", path, len(history.fens))
        return HistoryModel(fens=list(history.fens), cursor=len(history.fens) - 1)

    def delete_history(self, name: str) -> HistoryModel | None:
        history = self.get_history(name)
        if history is None:
            return None
        try:
            self._path(name).unlink()
        except OSError as error:
            raise HistoryIoError(f"Error deleting history: {error}") from error
        return history

    def _path(self, name: str) -> Path:
        return self.base_dir / name
