"""
Starting positions: the classical one, and Fischer random (Chess960) back ranks.

NOTE: Castling in this engine uses the classical king/rook squares, so a Chess960 position starts without castling rights.
"""

import random
from typing import Optional

from fenboard.chess.fen import STARTING_FEN
from fenboard.chess.square import BOARD_DIMENSIONS

NUM_FILES = BOARD_DIMENSIONS[1]


def standard_fen() -> str:
    return STARTING_FEN


def chess960_back_rank(rng: Optional[random.Random] = None) -> str:
    """
    Shuffle the white back rank (upper case letters, a-file first)
    ----

    1. bishops on opposite colored squares
    2. the queen and both knights on any of the free squares
    3. the three squares left over get rook, king, rook (so the king always stands between the rooks)
    """
    rng = rng or random.Random()
    back_rank: list[Optional[str]] = [None] * NUM_FILES

    back_rank[rng.choice(range(0, NUM_FILES, 2))] = "B"
    back_rank[rng.choice(range(1, NUM_FILES, 2))] = "B"

    for piece in ("Q", "N", "N"):
        free_files = [file for file, char in enumerate(back_rank) if char is None]
        back_rank[rng.choice(free_files)] = piece

    remaining = [file for file, char in enumerate(back_rank) if char is None]
    for file, piece in zip(remaining, ("R", "K", "R")):
        back_rank[file] = piece

    return "".join(char for char in back_rank if char is not None)


def chess960_fen(rng: Optional[random.Random] = None) -> str:
    """Black mirrors white's back rank."""
    white_rank = chess960_back_rank(rng)
    placement = "/".join(
        [white_rank.lower(), "pppppppp", "8", "8", "8", "8", "PPPPPPPP", white_rank]
    )
    return f"{placement} w - - 0 1"
