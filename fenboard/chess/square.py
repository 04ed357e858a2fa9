"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8 (rows, columns).
BOARD_DIMENSIONS = (8, 8)
FILE_NAMES = "abcdefgh"
# rank numbers and empty-square run lengths: ASCII 1-8 only
RANK_DIGITS = "12345678"


@dataclass(frozen=True)
class Square:
    """
    Row 0 is the first rank written in a FEN string (black's back rank, the 8th rank), row 7 is white's back rank.
    Column 0 is the a-file.
    """

    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: 'a8' maps to (0, 0), 'h1' maps to (7, 7)"""
        col = ord(sq[0].lower()) - ord("a")
        rank = int(sq[1:])
        return cls(BOARD_DIMENSIONS[0] - rank, col)

    def to_algebraic(self) -> str:
        return f"{FILE_NAMES[self.col]}{BOARD_DIMENSIONS[0] - self.row}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_row: int, d_col: int) -> Square:
        """Neighbouring square. NOTE: may be off the board, check with is_within_bounds()"""
        return Square(self.row + d_row, self.col + d_col)


def is_algebraic_square(name: str) -> bool:
    """True for 'a1' through 'h8' (lower case file letter followed by a single rank digit)"""
    if len(name) != 2:
        return False
    file_char, rank_char = name[0], name[1]
    if file_char not in FILE_NAMES:
        return False
    return rank_char in RANK_DIGITS


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(row, col)
    for row in range(BOARD_DIMENSIONS[0])
    for col in range(BOARD_DIMENSIONS[1])
)
