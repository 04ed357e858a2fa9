"""
The Move Validator is the entrypoint into the rules for a single move.

attempt_move(state, from, to) either accepts the move and hands back a brand new GameState, or rejects it and hands back
the untouched state. The GameState passed in is never mutated: every move is played out on a copy of the board, and the
copy is simply dropped when the move turns out to be illegal.
"""

import logging
from dataclasses import dataclass

from fenboard.chess.board import Board
from fenboard.chess.check import is_board_in_check
from fenboard.chess.moves import (
    MOVEMENT_RULES,
    Move,
    en_passant_victim_square,
    is_castling_shape,
    is_en_passant_capture,
)
from fenboard.chess.pieces import Piece
from fenboard.chess.position import GameState
from fenboard.chess.special_moves import (
    assert_can_castle,
    castling_direction_for,
    move_castling_pieces,
    next_en_passant_square,
    promote_if_needed,
    revoke_castling_rights,
)
from fenboard.chess.square import ALL_SQUARES, Square
from fenboard.core.exceptions import InvalidMoveError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a move attempt. On rejection `state` is the state that was passed in and `reason` says why."""

    accepted: bool
    state: GameState
    reason: str = ""


def validate_move(state: GameState, from_square: Square, to_square: Square) -> GameState:
    """
    Play the move on a copy of the position, raising InvalidMoveError if it is not allowed.
    ----

    1. preconditions: squares on the board, your own piece on `from`, no capture of your own piece
    2. shape of the move (per piece type) or castling eligibility
    3. play the move on a copy of the board (incl. castling rook / en passant capture)
    4. reject if your own king is left in check
    5. promotion, castling rights, en passant target, and finally the side to move
    """
    move = Move(from_square, to_square)
    moving_piece = _assert_preconditions(state, move)

    # en passant / castling have to be recognised on the position BEFORE the move
    en_passant = is_en_passant_capture(move, state)
    castling_direction = None
    if is_castling_shape(move, moving_piece):
        castling_direction = castling_direction_for(move)
        if castling_direction is None or castling_direction.color != moving_piece.color:
            raise InvalidMoveError(f"Not a castling move: {move.to_algebraic()}")
        assert_can_castle(state, moving_piece.color, castling_direction.side)
    elif not MOVEMENT_RULES[moving_piece.type](move, state):
        raise InvalidMoveError(
            f"A {moving_piece.type.name.lower()} cannot move {move.to_algebraic()}"
        )

    board = state.board.copy()
    if castling_direction is not None:
        move_castling_pieces(board, castling_direction)
        captured = None
    else:
        captured = board.move_piece(move.from_square, move.to_square)
        if en_passant:
            captured = board.remove_piece(en_passant_victim_square(move))

    if is_board_in_check(board, moving_piece.color):
        raise InvalidMoveError(
            f"Move {move.to_algebraic()} leaves your own king in check"
        )

    return _next_state(state, board, move, moving_piece, captured)


def attempt_move(state: GameState, from_square: Square, to_square: Square) -> MoveResult:
    """Illegal moves are recovered here: the caller gets the unchanged state back together with the reason."""
    try:
        new_state = validate_move(state, from_square, to_square)
    except InvalidMoveError as error:
        _LOGGER.debug(
            "Rejected move %s%s: %s",
            _name(from_square),
            _name(to_square),
            error,
        )
        return MoveResult(accepted=False, state=state, reason=str(error))

    _LOGGER.debug("Accepted move %s%s", _name(from_square), _name(to_square))
    return MoveResult(accepted=True, state=new_state)


def is_legal_move(state: GameState, from_square: Square, to_square: Square) -> bool:
    return attempt_move(state, from_square, to_square).accepted


def legal_destinations(state: GameState, from_square: Square) -> list[Square]:
    """All squares the piece on `from_square` may legally move to (empty if it is not that side's turn)."""
    if not from_square.is_within_bounds():
        return []
    return [
        to_square
        for to_square in ALL_SQUARES
        if to_square != from_square and is_legal_move(state, from_square, to_square)
    ]


# -- PRIVATE HELPERS ---
def _assert_preconditions(state: GameState, move: Move) -> Piece:
    """Checks that do not depend on the piece type. Returns the moving piece."""
    if not (move.from_square.is_within_bounds() and move.to_square.is_within_bounds()):
        raise InvalidMoveError(f"Square off the board: {move}")

    if move.from_square == move.to_square:
        raise InvalidMoveError("A piece has to move to another square")

    moving_piece = state.board.piece(move.from_square)
    if moving_piece is None:
        raise InvalidMoveError(f"No piece on {move.from_square.to_algebraic()}")

    if moving_piece.color != state.color_to_move:
        raise InvalidMoveError(
            f"It is not your turn. {state.color_to_move.name.lower()} is to move."
        )

    target = state.board.piece(move.to_square)
    if target is not None and target.color == moving_piece.color:
        raise InvalidMoveError(
            f"Cannot capture your own piece on {move.to_square.to_algebraic()}"
        )
    return moving_piece


def _next_state(
    state: GameState,
    board: Board,
    move: Move,
    moving_piece: Piece,
    captured: Piece | None,
) -> GameState:
    promote_if_needed(board, move.to_square)
    castling_rights = revoke_castling_rights(
        state.castling_rights, move, moving_piece, captured
    )
    return GameState(
        board=board,
        color_to_move=moving_piece.color.opponent,
        castling_rights=castling_rights,
        # the old target expires with this ply, a double step may set a new one
        en_passant_square=next_en_passant_square(move, moving_piece),
    )


def _name(square: Square) -> str:
    return square.to_algebraic() if square.is_within_bounds() else str(square)
