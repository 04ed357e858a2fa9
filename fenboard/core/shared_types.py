"""
Type definitions used across layers (API responses, persistence)
"""

from enum import StrEnum


class Side(StrEnum):
    """Color names as they travel across boundaries. The domain layer uses fenboard.chess.pieces.Color"""

    WHITE = "white"
    BLACK = "black"
