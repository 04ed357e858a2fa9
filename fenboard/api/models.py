"""Requests and Response models exchanged with a front end"""

from pydantic import BaseModel, field_validator

from fenboard.chess.fen import MAX_FEN_FIELDS
from fenboard.chess.square import is_algebraic_square
from fenboard.core.exceptions import InvalidRequestError
from fenboard.core.shared_types import Side


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    from_square: str
    to_square: str

    @field_validator("from_square", "to_square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        value = value.strip().lower()
        if not is_algebraic_square(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid square name."
            )
        return value


class ImportPositionRequest(BaseModel):
    fen: str

    @field_validator("fen")
    @classmethod
    def validate_fen(cls, value: str) -> str:
        """Structural check only: the FEN codec does the real validation."""
        value = value.strip()
        parts = value.split()
        if not 1 <= len(parts) <= MAX_FEN_FIELDS:
            raise InvalidRequestError(
                f"FEN string must contain 1 to {MAX_FEN_FIELDS} space-separated parts."
            )
        return value


class ImportHistoryRequest(BaseModel):
    fens: list[str]

    @field_validator("fens")
    @classmethod
    def validate_fens(cls, value: list[str]) -> list[str]:
        """Blank lines (ex. a trailing newline in a history file) are dropped. Nothing left means nothing to import."""
        fens = [fen.strip() for fen in value if fen.strip()]
        if not fens:
            raise InvalidRequestError("Cannot import an empty history.")
        return fens


# --- RESPONSE MODELS ---
class PositionResponse(BaseModel):
    fen: str
    color_to_move: Side
    in_check: bool
    cursor: int
    history_length: int
    can_undo: bool
    can_redo: bool


class MoveResponse(BaseModel):
    accepted: bool
    reason: str
    position: PositionResponse


class HistoryResponse(BaseModel):
    fens: list[str]
    cursor: int
