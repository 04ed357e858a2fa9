"""
FEN codec: convert between a FEN string and a GameState.
----

FEN, or Forsyth-Edwards Notation, is a standard notation for describing a particular board position of a chess game.

<board position string> <active color> <castling rights> <en passant square> <# half move clock> <number turns played>

* The string to describe the board position is described in the Board class
* The active color is either "w" or "b" (upper case is accepted when decoding)
* Castling rights are denoted as "k" for king-side or "q" for queen-side. Capital letters for the white pieces, small letters for the black pieces.
    In the starting position: KQkq (all rights available), and "-" once every right has been revoked.
* The en passant square indicates the square a pawn skipped over on the last ply. If not available a "-" is used.
* The half move clock and the number of turns are accepted, but not tracked: encoding always writes "0 1".

ex) The standard starting position has a FEN
rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1

Only the placement field is required when decoding. Missing fields fall back to: white to move, no castling rights,
no en passant square.
"""

import logging

from fenboard.chess.board import Board
from fenboard.chess.castling import CASTLING_ORDER, CastlingRights
from fenboard.chess.pieces import Color, is_piece_letter
from fenboard.chess.position import GameState
from fenboard.chess.square import BOARD_DIMENSIONS, RANK_DIGITS, Square, is_algebraic_square
from fenboard.core.exceptions import MalformedFenError

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
# halfmove clock / fullmove number are not tracked
MOVE_COUNTERS_FEN = "0 1"
MAX_FEN_FIELDS = 6


# --- VALIDATION ---
def is_valid_position(position: str) -> bool:
    """Only check the part of the FEN encoding for the board position."""
    num_ranks, num_files = BOARD_DIMENSIONS
    rank_fens = position.split("/")
    if len(rank_fens) != num_ranks:
        return False

    for rank_fen in rank_fens:
        file_count = 0
        for character in rank_fen:
            # make sure every character is valid
            if character in RANK_DIGITS:
                file_count += int(character)
            elif is_piece_letter(character):
                file_count += 1
            else:
                # immediately invalidate if the character is anything else
                return False

        # make sure you are creating a correctly sized board
        if file_count != num_files:
            return False
    return True


def is_valid_color_code(color: str) -> bool:
    return color.lower() in {"w", "b"}


def is_valid_castling_rights(castling: str) -> bool:
    """Either '-' or any selection of K, Q, k, q, each used at most once."""
    if castling == "-":
        return True
    allowed = {direction.value for direction in CASTLING_ORDER}
    return (
        len(castling) > 0
        and set(castling) <= allowed
        and len(set(castling)) == len(castling)
    )


def is_valid_en_passant(en_passant: str) -> bool:
    """Valid en passant square encoding should be a square that exists on the board or a '-'"""
    return (en_passant == "-") or is_algebraic_square(en_passant)


def validate_fen(fen: str) -> list[str]:
    """
    Split a FEN string into its fields, raising MalformedFenError for anything the engine cannot consume.
    Move counters are not inspected.
    """
    parts = fen.split()
    if not parts:
        raise MalformedFenError("Cannot interpret an empty string as FEN.")
    if len(parts) > MAX_FEN_FIELDS:
        raise MalformedFenError(
            f"FEN has {len(parts)} fields, at most {MAX_FEN_FIELDS} allowed: {fen!r}"
        )

    if not is_valid_position(parts[0]):
        raise MalformedFenError(
            f"Placement must be {BOARD_DIMENSIONS[0]} ranks of {BOARD_DIMENSIONS[1]} files using PNBRQK/pnbrqk: {parts[0]!r}"
        )
    if len(parts) > 1 and not is_valid_color_code(parts[1]):
        raise MalformedFenError(f"Active color must be 'w' or 'b': {parts[1]!r}")
    if len(parts) > 2 and not is_valid_castling_rights(parts[2]):
        raise MalformedFenError(f"Invalid castling field: {parts[2]!r}")
    if len(parts) > 3 and not is_valid_en_passant(parts[3]):
        raise MalformedFenError(f"Invalid en passant field: {parts[3]!r}")
    return parts


# --- CODEC ---
def decode(fen: str) -> GameState:
    """Parse the FEN into a new GameState. Everything is validated before the board gets built."""
    try:
        parts = validate_fen(fen)
    except MalformedFenError:
        _LOGGER.warning("Rejected malformed FEN %r", fen)
        raise

    board = Board.from_fen(parts[0])

    # Check which color is to move
    color_to_move = Color.WHITE
    if len(parts) > 1 and parts[1].lower() == "b":
        color_to_move = Color.BLACK

    # absent castling field: no rights at all
    castling_rights = (
        CastlingRights.from_fen(parts[2]) if len(parts) > 2 else CastlingRights.none()
    )

    # parse en passant target square
    en_passant_square = None
    if len(parts) > 3 and parts[3] != "-":
        en_passant_square = Square.from_algebraic(parts[3])

    return GameState(board, color_to_move, castling_rights, en_passant_square)


def encode(state: GameState) -> str:
    """reverse operation: write a FEN from the given state"""
    active_color = "w" if state.color_to_move == Color.WHITE else "b"
    castling_str = state.castling_rights.to_fen()
    en_passant_algebraic = (
        state.en_passant_square.to_algebraic()
        if state.en_passant_square is not None
        else "-"
    )
    return f"{state.board.to_fen()} {active_color} {castling_str} {en_passant_algebraic} {MOVE_COUNTERS_FEN}"


def is_valid_fen(fen: str) -> bool:
    try:
        validate_fen(fen)
    except MalformedFenError:
        return False
    return True


def starting_position() -> GameState:
    return decode(STARTING_FEN)
