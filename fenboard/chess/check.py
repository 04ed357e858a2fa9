"""
Check detection: is a square (or a king) attacked by the opponent?

Used both for filtering out moves that leave your own king in check, and for the castling safety checks.
"""

from fenboard.chess.board import Board
from fenboard.chess.moves import ATTACK_RULES
from fenboard.chess.pieces import Color
from fenboard.chess.position import GameState
from fenboard.chess.square import Square


def is_square_attacked(board: Board, square: Square, by_color: Color) -> bool:
    """Ask every piece type if it can attack the square (the per piece rules live in fenboard.chess.moves)"""
    return any(
        is_attacked(square, by_color, board) for is_attacked in ATTACK_RULES.values()
    )


def is_attacked(state: GameState, square: Square, by_color: Color) -> bool:
    return is_square_attacked(state.board, square, by_color)


def is_any_attacked(board: Board, squares: list[Square], by_color: Color) -> bool:
    return any(is_square_attacked(board, square, by_color) for square in squares)


def is_board_in_check(board: Board, color: Color) -> bool:
    """
    Locate the king of `color` and ask whether the opponent attacks it.

    NOTE: the engine assumes exactly one king per color. A board without a king (only possible through an odd FEN import)
    is never in check.
    """
    king_square = board.locate_king(color)
    if king_square is None:
        return False
    return is_square_attacked(board, king_square, color.opponent)


def is_king_in_check(state: GameState, color: Color) -> bool:
    return is_board_in_check(state.board, color)
