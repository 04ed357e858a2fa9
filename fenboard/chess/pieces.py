"""Defines the types of chess pieces"""

from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping, Self


class PieceType(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


# read-only lookup tables: lower case letters, color is decided by the case of the character
FEN_TO_PIECE: Mapping[str, PieceType] = MappingProxyType(
    {
        "p": PieceType.PAWN,
        "n": PieceType.KNIGHT,
        "b": PieceType.BISHOP,
        "r": PieceType.ROOK,
        "q": PieceType.QUEEN,
        "k": PieceType.KING,
    }
)

PIECE_TO_FEN: Mapping[PieceType, str] = MappingProxyType(
    {value: key for key, value in FEN_TO_PIECE.items()}
)


def is_piece_letter(character: str) -> bool:
    return character.lower() in FEN_TO_PIECE


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )

    def promoted_to(self, new_type: PieceType) -> Self:
        """Pieces are immutable values: promotion hands back a new piece of the same color"""
        return type(self)(new_type, self.color)
