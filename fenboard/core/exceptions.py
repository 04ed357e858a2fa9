"""
Exceptions raised across layers.

Everything derives from ChessError, so a front end can catch a single type if it does not care about the details.
"""


class ChessError(Exception):
    """Base class for all errors raised by fenboard."""


# --- DOMAIN ERRORS ---
class InvalidMoveError(ChessError):
    """Shape rule failed, same-color capture, wrong side to move, or the move leaves your own king in check."""


class MalformedFenError(ChessError):
    """Text could not be decoded as a FEN position. The current position is never touched when this is raised."""


class NavigationOutOfRange(ChessError):
    """
    Undo/redo/jump beyond the ends of the history.

    NOTE: History navigation treats this as a silent no-op (returns None). Kept so callers that prefer exceptions
    can raise it themselves.
    """


# --- BOUNDARY / PERSISTENCE ERRORS ---
class HistoryIoError(ChessError):
    """Importing or exporting the move history failed (empty, malformed, or the storage itself failed)."""


class RepositoryError(ChessError):
    """Requested record does not exist in the repository."""


class InvalidRequestError(ChessError):
    """
    Raised from the pydantic validators of the request models.

    NOTE: must not subclass ValueError, otherwise pydantic wraps it in a ValidationError.
    """
