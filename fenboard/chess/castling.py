"""Helpers for implementing Castling rules. Need to be imported by multiple sources"""

from dataclasses import dataclass, replace
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping, Self

from fenboard.chess.pieces import Color
from fenboard.chess.square import Square


class CastlingSide(Enum):
    KING_SIDE = auto()
    QUEEN_SIDE = auto()


class CastlingDirection(Enum):
    """The four castling directions. Values represent their encodings in FEN string."""

    WHITE_KING_SIDE = "K"
    WHITE_QUEEN_SIDE = "Q"
    BLACK_KING_SIDE = "k"
    BLACK_QUEEN_SIDE = "q"

    @classmethod
    def of(cls, color: Color, side: CastlingSide) -> "CastlingDirection":
        return _DIRECTIONS[(color, side)]

    @property
    def color(self) -> Color:
        return Color.WHITE if self.value.isupper() else Color.BLACK

    @property
    def side(self) -> CastlingSide:
        return (
            CastlingSide.KING_SIDE
            if self.value.lower() == "k"
            else CastlingSide.QUEEN_SIDE
        )


_DIRECTIONS: Mapping[tuple[Color, CastlingSide], CastlingDirection] = MappingProxyType(
    {
        (Color.WHITE, CastlingSide.KING_SIDE): CastlingDirection.WHITE_KING_SIDE,
        (Color.WHITE, CastlingSide.QUEEN_SIDE): CastlingDirection.WHITE_QUEEN_SIDE,
        (Color.BLACK, CastlingSide.KING_SIDE): CastlingDirection.BLACK_KING_SIDE,
        (Color.BLACK, CastlingSide.QUEEN_SIDE): CastlingDirection.BLACK_QUEEN_SIDE,
    }
)

# FEN order of the castling field
CASTLING_ORDER: tuple[CastlingDirection, ...] = (
    CastlingDirection.WHITE_KING_SIDE,
    CastlingDirection.WHITE_QUEEN_SIDE,
    CastlingDirection.BLACK_KING_SIDE,
    CastlingDirection.BLACK_QUEEN_SIDE,
)


@dataclass(frozen=True)
class CastlingSquares:
    """
    Store the squares where king/rook start from/end up in by castling.
    NOTE: If castling rights have not been revoked, we already know the king / rook are still at their starting squares.
    """

    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square

    @classmethod
    def from_algebraic(cls, k_from: str, k_to: str, r_from: str, r_to: str) -> Self:
        """Convenience method: to make mapping shown below (from CastlingDirection) more readable"""
        king_from = Square.from_algebraic(k_from)
        king_to = Square.from_algebraic(k_to)
        rook_from = Square.from_algebraic(r_from)
        rook_to = Square.from_algebraic(r_to)
        return cls(king_from, king_to, rook_from, rook_to)

    def squares_between(self) -> list[Square]:
        """Every square strictly between king and rook: all must be empty to castle"""
        row = self.king_from.row
        low, high = sorted((self.king_from.col, self.rook_from.col))
        return [Square(row, col) for col in range(low + 1, high)]

    def king_path(self) -> list[Square]:
        """Start square, the square passed through and the landing square: none may be attacked"""
        row = self.king_from.row
        step = 1 if self.king_to.col > self.king_from.col else -1
        return [
            Square(row, col)
            for col in range(self.king_from.col, self.king_to.col + step, step)
        ]


# The moves (in classical chess) made when castling
CASTLING_RULES: Mapping[CastlingDirection, CastlingSquares] = MappingProxyType(
    {
        CastlingDirection.WHITE_KING_SIDE: CastlingSquares.from_algebraic(
            "e1", "g1", "h1", "f1"
        ),
        CastlingDirection.WHITE_QUEEN_SIDE: CastlingSquares.from_algebraic(
            "e1", "c1", "a1", "d1"
        ),
        CastlingDirection.BLACK_KING_SIDE: CastlingSquares.from_algebraic(
            "e8", "g8", "h8", "f8"
        ),
        CastlingDirection.BLACK_QUEEN_SIDE: CastlingSquares.from_algebraic(
            "e8", "c8", "a8", "d8"
        ),
    }
)


@dataclass(frozen=True)
class CastlingRights:
    """
    Four independent flags. Rights only ever get revoked (king or rook moved), never granted back,
    so every revoke hands back a new value.
    """

    white_king_side: bool = True
    white_queen_side: bool = True
    black_king_side: bool = True
    black_queen_side: bool = True

    @classmethod
    def none(cls) -> Self:
        return cls(False, False, False, False)

    @classmethod
    def from_fen(cls, castle_fen: str) -> Self:
        """parse the part of the FEN string that encodes castling rights ('-' yields no rights)"""
        return cls(
            *(direction.value in castle_fen for direction in CASTLING_ORDER)
        )

    def to_fen(self) -> str:
        """create the part of the FEN string that encodes castling rights"""
        castling_chars = "".join(
            direction.value for direction in CASTLING_ORDER if self.has(direction)
        )
        return castling_chars or "-"

    def has(self, direction: CastlingDirection) -> bool:
        return getattr(self, _FLAG_NAMES[direction])

    def has_any(self, color: Color) -> bool:
        return any(
            self.has(CastlingDirection.of(color, side)) for side in CastlingSide
        )

    def revoke(self, direction: CastlingDirection) -> Self:
        return replace(self, **{_FLAG_NAMES[direction]: False})

    def revoke_all(self, color: Color) -> Self:
        rights = self
        for side in CastlingSide:
            rights = rights.revoke(CastlingDirection.of(color, side))
        return rights


_FLAG_NAMES: Mapping[CastlingDirection, str] = MappingProxyType(
    {
        CastlingDirection.WHITE_KING_SIDE: "white_king_side",
        CastlingDirection.WHITE_QUEEN_SIDE: "white_queen_side",
        CastlingDirection.BLACK_KING_SIDE: "black_king_side",
        CastlingDirection.BLACK_QUEEN_SIDE: "black_queen_side",
    }
)
