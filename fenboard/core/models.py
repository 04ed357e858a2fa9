"""
Boundary layer data model(s).

The Service sends/receives these objects to/from a repository, which decouples the storage format from the domain layer.
"""

from dataclasses import dataclass, field


@dataclass
class HistoryModel:
    """Transport-safe representation of a move history: FEN snapshots in play order + the cursor."""

    fens: list[str] = field(default_factory=list)
    cursor: int = -1
