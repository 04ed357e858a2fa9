"""
Representation of a single position in a game. The part that can be encoded in a FEN string.
"""

from dataclasses import dataclass, field
from typing import Optional, Self

from fenboard.chess.board import Board
from fenboard.chess.castling import CastlingRights
from fenboard.chess.pieces import Color
from fenboard.chess.square import Square


@dataclass
class GameState:
    """
    Everything the engine needs to judge the next move.
    ----

    * the board (placement of the pieces)
    * the color to move
    * the castling rights still available
    * the en passant target: the square a pawn skipped over on the previous ply (None if the last move was no double step)

    NOTE: The half move clock and full move number of a FEN string are not tracked.
    """

    board: Board = field(default_factory=Board)
    color_to_move: Color = Color.WHITE
    castling_rights: CastlingRights = field(default_factory=CastlingRights)
    en_passant_square: Optional[Square] = None

    def copy(self) -> Self:
        """Independent snapshot: the board is copied, all other fields are immutable values."""
        return type(self)(
            board=self.board.copy(),
            color_to_move=self.color_to_move,
            castling_rights=self.castling_rights,
            en_passant_square=self.en_passant_square,
        )
