"""
Special moves: castling, en passant and promotion.
----

* castling eligibility + moving the king and rook together, and keeping the castling rights up to date
* the en passant target: cleared on every ply, re-set only by a pawn double step
* promotion: a pawn reaching the last rank always becomes a queen (no underpromotion)
"""

from typing import Optional

from fenboard.chess.board import Board
from fenboard.chess.castling import (
    CASTLING_RULES,
    CastlingDirection,
    CastlingRights,
    CastlingSide,
)
from fenboard.chess.check import is_any_attacked, is_king_in_check
from fenboard.chess.moves import PAWN_DIRECTION, PAWN_HOME_ROW, PROMOTION_ROW, Move
from fenboard.chess.pieces import Color, Piece, PieceType
from fenboard.chess.position import GameState
from fenboard.chess.square import Square
from fenboard.core.exceptions import InvalidMoveError

PROMOTION_PIECE = PieceType.QUEEN


# -- CASTLING RULE HELPERS ---
def castling_direction_for(move: Move) -> Optional[CastlingDirection]:
    """Which castling (if any) a king move from/to these squares would be."""
    for direction, squares in CASTLING_RULES.items():
        if (move.from_square, move.to_square) == (squares.king_from, squares.king_to):
            return direction
    return None


def assert_can_castle(state: GameState, color: Color, side: CastlingSide) -> None:
    """
    Raise InvalidMoveError if `color` may not castle towards `side`
    ---

    **you are allowed to castle if**

    * Castling rights are not yet revoked (neither the king nor that rook has moved).
    * The king and the rook still stand on their starting squares.
    * You are not currently in check (you cannot castle out of check).
    * Every square between king and rook is empty.
    * None of the squares the king starts on, passes through or lands on is attacked.
    """
    direction = CastlingDirection.of(color, side)
    squares = CASTLING_RULES[direction]

    if not state.castling_rights.has(direction):
        raise InvalidMoveError(f"Castling rights revoked: {direction.value}")

    board = state.board
    if board.piece(squares.king_from) != Piece(PieceType.KING, color) or board.piece(
        squares.rook_from
    ) != Piece(PieceType.ROOK, color):
        raise InvalidMoveError(
            f"King and rook are not on their castling squares: {direction.value}"
        )

    if is_king_in_check(state, color):
        raise InvalidMoveError("Cannot castle out of check")

    if board.is_any_occupied(squares.squares_between()):
        raise InvalidMoveError("Cannot castle: squares between king and rook are occupied")

    if is_any_attacked(board, squares.king_path(), color.opponent):
        raise InvalidMoveError("Cannot castle through or into an attacked square")


def can_castle(state: GameState, color: Color, side: CastlingSide) -> bool:
    try:
        assert_can_castle(state, color, side)
    except InvalidMoveError:
        return False
    return True


def move_castling_pieces(board: Board, direction: CastlingDirection) -> None:
    """Move both the King and the Rook: king two squares towards the rook, rook right next to it on the inside."""
    squares = CASTLING_RULES[direction]
    board.move_piece(squares.king_from, squares.king_to)
    board.move_piece(squares.rook_from, squares.rook_to)


def revoke_castling_rights(
    rights: CastlingRights,
    move: Move,
    moving_piece: Piece,
    captured_piece: Optional[Piece],
) -> CastlingRights:
    """
    Checks which rights should get revoked
    ----

    1. If you are moving your king (castling included) --> revoke both
    2. If you are moving a rook away from its starting square --> revoke the right in that direction
    3. If you are taking your opponent's rook on its starting square --> revoke one of your opponent's rights
    """
    player_color = moving_piece.color
    if moving_piece.type == PieceType.KING:
        rights = rights.revoke_all(player_color)

    for direction, squares in CASTLING_RULES.items():
        if (
            moving_piece.type == PieceType.ROOK
            and direction.color == player_color
            and move.from_square == squares.rook_from
        ):
            rights = rights.revoke(direction)

        if (
            captured_piece == Piece(PieceType.ROOK, player_color.opponent)
            and direction.color == player_color.opponent
            and move.to_square == squares.rook_from
        ):
            rights = rights.revoke(direction)
    return rights


# --- EN PASSANT RULE HELPERS ----
def next_en_passant_square(move: Move, moving_piece: Piece) -> Optional[Square]:
    """The en passant target for the next ply: the square skipped over by a pawn double step from its home rank."""
    if moving_piece.type != PieceType.PAWN:
        return None

    direction = PAWN_DIRECTION[moving_piece.color]
    is_double_step = (
        move.col_delta == 0
        and move.row_delta == 2 * direction
        and move.from_square.row == PAWN_HOME_ROW[moving_piece.color]
    )
    if not is_double_step:
        return None
    return move.from_square.offset(direction, 0)


# -- PROMOTION RULE HELPERS ---
def is_promotion_square(square: Square, piece: Piece) -> bool:
    return piece.type == PieceType.PAWN and square.row == PROMOTION_ROW[piece.color]


def promote_if_needed(board: Board, square: Square) -> bool:
    """A pawn standing on the opponent's back rank is replaced by a queen of the same color. Returns True if it promoted."""
    piece = board.piece(square)
    if piece is None or not is_promotion_square(square, piece):
        return False
    board.place_piece(piece.promoted_to(PROMOTION_PIECE), square)
    return True
