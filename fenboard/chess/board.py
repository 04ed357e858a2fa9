"""
The Board holds the `position` (in chess: the configuration of pieces on the board).

Pure data: no legality is checked here, the callers (validator / special moves) enforce the rules.
"""

from dataclasses import dataclass, field
from typing import Optional, Self

from fenboard.chess.pieces import Color, Piece, PieceType
from fenboard.chess.square import ALL_SQUARES, BOARD_DIMENSIONS, RANK_DIGITS, Square

Grid = list[list[Optional[Piece]]]


def _empty_grid() -> Grid:
    num_rows, num_cols = BOARD_DIMENSIONS
    return [[None] * num_cols for _ in range(num_rows)]


@dataclass
class Board:
    grid: Grid = field(default_factory=_empty_grid)

    @classmethod
    def empty(cls) -> Self:
        return cls()

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the placement field of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank (row 0), starting with rook on a8, knight on b8, etc.
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank (row 7) are the white pieces.

        NOTE: Expects an already validated placement (see fenboard.chess.fen.decode)
        """
        board = cls()
        for row, fen_one_rank in enumerate(fen_str.split("/")):
            col = 0
            for character in fen_one_rank:
                if character in RANK_DIGITS:
                    # A number denotes the amount of empty squares after each other
                    col += int(character)
                else:
                    board.place_piece(Piece.from_fen(character), Square(row, col))
                    col += 1
        return board

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(self._rank_to_fen(row) for row in range(BOARD_DIMENSIONS[0]))

    def _rank_to_fen(self, row: int) -> str:
        """FEN string of a single rank"""
        fen_characters: list[str] = []
        empty_count = 0
        for piece in self.grid[row]:
            if piece is None:
                empty_count += 1
                continue

            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_fen())

        # if the entire rank is empty, then we still place this number in the string
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.grid[square.row][square.col]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.grid[square.row][square.col] = piece

    def remove_piece(self, square: Square) -> Optional[Piece]:
        """Clear the square and hand back whatever stood there"""
        piece = self.piece(square)
        self.grid[square.row][square.col] = None
        return piece

    def move_piece(self, from_square: Square, to_square: Square) -> Optional[Piece]:
        """Update the position on the board. Returns the captured piece (if any)."""
        moving_piece = self.remove_piece(from_square)
        captured = self.piece(to_square)
        self.grid[to_square.row][to_square.col] = moving_piece
        return captured

    def copy(self) -> Self:
        """Independent copy. Pieces are immutable, so copying the rows is enough."""
        return type(self)([list(row) for row in self.grid])

    def occupied_squares(self) -> list[Square]:
        return [square for square in ALL_SQUARES if not self.is_empty(square)]

    def locate_pieces(self, piece_type: PieceType, color: Color) -> list[Square]:
        return [
            square
            for square in ALL_SQUARES
            if self.piece(square) == Piece(piece_type, color)
        ]

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square
            for square in ALL_SQUARES
            if (piece := self.piece(square)) is not None and piece.color == color
        ]

    def locate_king(self, color: Color) -> Optional[Square]:
        """The engine assumes a single king per color. Returns the first one found, or None on a board without one."""
        kings = self.locate_pieces(PieceType.KING, color)
        return kings[0] if kings else None

    def is_any_occupied(self, squares: list[Square]) -> bool:
        return any(not self.is_empty(square) for square in squares)
