"""Unit tests for fenboard/chess/position.py"""

from fenboard.chess.board import Board
from fenboard.chess.castling import CastlingDirection, CastlingRights
from fenboard.chess.pieces import Color
from fenboard.chess.position import GameState
from fenboard.chess.square import Square

STARTING_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def test_default_state() -> None:
    state = GameState()
    assert state.board.occupied_squares() == []
    assert state.color_to_move == Color.WHITE
    assert state.castling_rights == CastlingRights()
    assert state.en_passant_square is None


def test_copy_is_independent() -> None:
    state = GameState(
        board=Board.from_fen(STARTING_POSITION),
        color_to_move=Color.BLACK,
        castling_rights=CastlingRights().revoke(CastlingDirection.WHITE_KING_SIDE),
        en_passant_square=Square.from_algebraic("e3"),
    )
    copy = state.copy()
    assert copy == state

    copy.board.remove_piece(Square.from_algebraic("e1"))
    copy.color_to_move = Color.WHITE
    assert state.board.to_fen() == STARTING_POSITION
    assert state.color_to_move == Color.BLACK
