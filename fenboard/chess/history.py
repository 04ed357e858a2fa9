"""
Linear move history: a growable list of FEN snapshots and a cursor pointing at the one currently displayed.

There is no redo-tree. Appending while the cursor is not at the tail throws away everything after the cursor (last branch wins).
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    index: int
    fen: str


@dataclass
class History:
    fens: list[str] = field(default_factory=list)
    cursor: int = -1

    def __post_init__(self) -> None:
        if not self.fens:
            self.cursor = -1
        elif not (0 <= self.cursor < len(self.fens)):
            self.cursor = len(self.fens) - 1

    def __len__(self) -> int:
        return len(self.fens)

    @property
    def current(self) -> Optional[HistoryEntry]:
        if not self.fens:
            return None
        return HistoryEntry(self.cursor, self.fens[self.cursor])

    @property
    def last_index(self) -> int:
        return len(self.fens) - 1

    @property
    def can_undo(self) -> bool:
        return self.cursor > 0

    @property
    def can_redo(self) -> bool:
        return self.cursor < self.last_index

    def entries(self) -> list[HistoryEntry]:
        return [HistoryEntry(index, fen) for index, fen in enumerate(self.fens)]

    def append(self, fen: str) -> HistoryEntry:
        """Discard every entry after the cursor, then push the snapshot and move the cursor onto it"""
        if self.can_redo:
            _LOGGER.debug(
                "Discarding %d history entries after index %d",
                self.last_index - self.cursor,
                self.cursor,
            )
            del self.fens[self.cursor + 1 :]
        self.fens.append(fen)
        self.cursor = self.last_index
        return HistoryEntry(self.cursor, fen)

    def undo(self) -> Optional[HistoryEntry]:
        return self.jump(self.cursor - 1)

    def redo(self) -> Optional[HistoryEntry]:
        return self.jump(self.cursor + 1)

    def jump(self, index: int) -> Optional[HistoryEntry]:
        """Move the cursor. Out of range is not an error, just a no-op signalled by returning None."""
        if not (0 <= index <= self.last_index):
            _LOGGER.debug(
                "History index %d out of range [0, %d], ignored", index, self.last_index
            )
            return None
        self.cursor = index
        return HistoryEntry(index, self.fens[index])

    def export_all(self) -> list[str]:
        return list(self.fens)

    def import_all(self, fens: Iterable[str]) -> bool:
        """Replace the whole sequence and put the cursor on the last entry. An empty sequence is rejected (no-op)."""
        new_fens = list(fens)
        if not new_fens:
            _LOGGER.warning("Refusing to import an empty history")
            return False
        self.fens = new_fens
        self.cursor = self.last_index
        return True
