import pytest

from fenboard.api.models import (
    ImportHistoryRequest,
    ImportPositionRequest,
    MoveRequest,
    MoveResponse,
    PositionResponse,
)
from fenboard.core.exceptions import InvalidRequestError
from fenboard.core.shared_types import Side

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


# -- Validation - ImportPositionRequest --
@pytest.mark.parametrize(
    "fen",
    [
        STARTING_FEN,
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR",  # placement only
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq",
    ],
)
def test_valid_fen(fen: str) -> None:
    """Test that ImportPositionRequest accepts 1 to 6 space-separated FEN fields."""
    request = ImportPositionRequest(fen=f" {fen} ")
    assert request.fen == fen


@pytest.mark.parametrize(
    "invalid_fen",
    [
        "",
        "   ",
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1 extra",  # too many space-separated values
    ],
)
def test_invalid_fen(invalid_fen: str) -> None:
    """Structurally invalid FEN: no fields at all, or more than 6 space-separated fields."""
    with pytest.raises(InvalidRequestError):
        _ = ImportPositionRequest(fen=invalid_fen)


# -- Validation - MoveRequest --
def test_valid_square_names() -> None:
    """Test that MoveRequest accepts correctly written squares in algebraic notation."""
    request = MoveRequest(from_square="e2", to_square="e4")
    assert request.from_square == "e2"
    assert request.to_square == "e4"


def test_square_names_are_normalized() -> None:
    request = MoveRequest(from_square=" E2", to_square="E4 ")
    assert (request.from_square, request.to_square) == ("e2", "e4")


@pytest.mark.parametrize("invalid_square", ["i3", "a9", "a0", "e", "e22", "", "2e", "e\u00b2"])
def test_invalid_square_names(invalid_square: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(from_square=invalid_square, to_square="e4")
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(from_square="e2", to_square=invalid_square)


# -- Validation - ImportHistoryRequest --
def test_blank_history_lines_are_dropped() -> None:
    request = ImportHistoryRequest(fens=[STARTING_FEN, "", "  ", f"{STARTING_FEN}\n"])
    assert request.fens == [STARTING_FEN, STARTING_FEN]


@pytest.mark.parametrize("fens", [[], [""], ["\n", "   "]])
def test_empty_history_is_rejected(fens: list[str]) -> None:
    with pytest.raises(InvalidRequestError):
        _ = ImportHistoryRequest(fens=fens)


# -- Responses --
def test_move_response_serialization() -> None:
    position = PositionResponse(
        fen=STARTING_FEN,
        color_to_move=Side.WHITE,
        in_check=False,
        cursor=0,
        history_length=1,
        can_undo=False,
        can_redo=False,
    )
    response = MoveResponse(accepted=False, reason="No piece on e4", position=position)
    dumped = response.model_dump(mode="json")
    assert dumped["accepted"] is False
    assert dumped["position"]["color_to_move"] == "white"
    assert dumped["position"]["fen"] == STARTING_FEN
