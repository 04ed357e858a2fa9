"""unit tests for fenboard/chess/castling.py"""

import pytest

from fenboard.chess.castling import (
    CASTLING_RULES,
    CastlingDirection,
    CastlingRights,
    CastlingSide,
    CastlingSquares,
)
from fenboard.chess.pieces import Color
from fenboard.chess.square import Square


def test_castling_squares_creation() -> None:
    """Test one case, just to have a little contract stating: 'I want to be able to create this dataclass'"""
    castling_squares = CastlingSquares.from_algebraic("e1", "g1", "h1", "f1")
    assert castling_squares.king_from == Square.from_algebraic("e1")
    assert castling_squares.king_to == Square.from_algebraic("g1")
    assert castling_squares.rook_from == Square.from_algebraic("h1")
    assert castling_squares.rook_to == Square.from_algebraic("f1")


@pytest.mark.parametrize(
    "direction, between",
    [
        (CastlingDirection.WHITE_KING_SIDE, ["f1", "g1"]),
        (CastlingDirection.WHITE_QUEEN_SIDE, ["d1", "c1", "b1"]),
        (CastlingDirection.BLACK_KING_SIDE, ["f8", "g8"]),
        (CastlingDirection.BLACK_QUEEN_SIDE, ["d8", "c8", "b8"]),
    ],
)
def test_squares_between_king_and_rook(
    direction: CastlingDirection, between: list[str]
) -> None:
    squares = CASTLING_RULES[direction].squares_between()
    assert set(squares) == {Square.from_algebraic(name) for name in between}


@pytest.mark.parametrize(
    "direction, path",
    [
        (CastlingDirection.WHITE_KING_SIDE, ["e1", "f1", "g1"]),
        (CastlingDirection.WHITE_QUEEN_SIDE, ["e1", "d1", "c1"]),
        (CastlingDirection.BLACK_KING_SIDE, ["e8", "f8", "g8"]),
        (CastlingDirection.BLACK_QUEEN_SIDE, ["e8", "d8", "c8"]),
    ],
)
def test_king_path(direction: CastlingDirection, path: list[str]) -> None:
    """b1/b8 are not on the king's path: the rook passes them, the king does not"""
    assert CASTLING_RULES[direction].king_path() == [
        Square.from_algebraic(name) for name in path
    ]


@pytest.mark.parametrize("direction", list(CastlingDirection))
def test_direction_lookup(direction: CastlingDirection) -> None:
    assert CastlingDirection.of(direction.color, direction.side) == direction


def test_direction_properties() -> None:
    assert CastlingDirection.BLACK_QUEEN_SIDE.color == Color.BLACK
    assert CastlingDirection.BLACK_QUEEN_SIDE.side == CastlingSide.QUEEN_SIDE
    assert CastlingDirection.WHITE_KING_SIDE.color == Color.WHITE
    assert CastlingDirection.WHITE_KING_SIDE.side == CastlingSide.KING_SIDE


# --- CASTLING RIGHTS ---
@pytest.mark.parametrize(
    "fen, expected_rights",
    [
        ("KQkq", CastlingRights(True, True, True, True)),
        ("KQk", CastlingRights(True, True, True, False)),
        ("KQ", CastlingRights(True, True, False, False)),
        ("q", CastlingRights(False, False, False, True)),
        ("-", CastlingRights(False, False, False, False)),
    ],
)
def test_castling_from_fen(fen: str, expected_rights: CastlingRights) -> None:
    assert CastlingRights.from_fen(fen) == expected_rights


@pytest.mark.parametrize(
    "expected_fen, rights",
    [
        ("KQkq", CastlingRights()),
        ("Kq", CastlingRights(True, False, False, True)),
        ("-", CastlingRights.none()),
    ],
)
def test_castling_to_fen(expected_fen: str, rights: CastlingRights) -> None:
    assert rights.to_fen() == expected_fen


def test_castling_to_fen_uses_canonical_order() -> None:
    assert CastlingRights.from_fen("qkQK").to_fen() == "KQkq"


def test_revoke_returns_new_rights() -> None:
    rights = CastlingRights()
    revoked = rights.revoke(CastlingDirection.WHITE_KING_SIDE)
    assert rights.has(CastlingDirection.WHITE_KING_SIDE)
    assert not revoked.has(CastlingDirection.WHITE_KING_SIDE)
    assert revoked.to_fen() == "Qkq"


@pytest.mark.parametrize("color", list(Color))
def test_revoke_all(color: Color) -> None:
    rights = CastlingRights().revoke_all(color)
    assert not rights.has_any(color)
    assert rights.has_any(color.opponent)


def test_revoking_twice_keeps_right_revoked() -> None:
    rights = CastlingRights.none().revoke(CastlingDirection.BLACK_KING_SIDE)
    assert rights == CastlingRights.none()
