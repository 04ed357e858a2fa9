"""
Orchestration between a front end (GUI, CLI, ...) and the rules engine / history / persistence.

A ChessSession owns exactly one current GameState and one History. The front end only ever calls the methods below
and renders whatever comes back; it never touches the GameState itself.
"""

import logging
from typing import Optional

from fenboard.api.models import (
    HistoryResponse,
    ImportHistoryRequest,
    ImportPositionRequest,
    MoveRequest,
    MoveResponse,
    PositionResponse,
)
from fenboard.chess.check import is_king_in_check
from fenboard.chess.fen import decode, encode
from fenboard.chess.history import History, HistoryEntry
from fenboard.chess.pieces import Color
from fenboard.chess.position import GameState
from fenboard.chess.square import Square, is_algebraic_square
from fenboard.chess.validator import attempt_move, legal_destinations
from fenboard.core.config import get_settings
from fenboard.core.exceptions import (
    HistoryIoError,
    InvalidRequestError,
    MalformedFenError,
    RepositoryError,
)
from fenboard.core.models import HistoryModel
from fenboard.core.shared_types import Side
from fenboard.db.repository import HistoryRepository

_LOGGER = logging.getLogger(__name__)


class ChessSession:
    """One board on screen, with its history."""

    def __init__(self, starting_fen: Optional[str] = None) -> None:
        fen = starting_fen or get_settings().starting_fen
        self.state: GameState = decode(fen)
        self.history = History()
        self.history.append(encode(self.state))

    # -- POSITION ---
    def position(self) -> PositionResponse:
        """Snapshot of everything a front end needs to render the current position"""
        color = self.state.color_to_move
        return PositionResponse(
            fen=encode(self.state),
            color_to_move=Side.WHITE if color == Color.WHITE else Side.BLACK,
            in_check=is_king_in_check(self.state, color),
            cursor=self.history.cursor,
            history_length=len(self.history),
            can_undo=self.history.can_undo,
            can_redo=self.history.can_redo,
        )

    def import_position(self, request: ImportPositionRequest | str) -> PositionResponse:
        """
        Replace the current position by the one encoded in the FEN.

        Raises MalformedFenError and leaves the current position as it was if the FEN is broken.
        """
        if isinstance(request, str):
            try:
                request = ImportPositionRequest(fen=request)
            except InvalidRequestError as error:
                _LOGGER.warning("Rejected malformed FEN %r", request)
                raise MalformedFenError(str(error)) from error

        # decode first: nothing may change before the FEN turned out to be valid
        new_state = decode(request.fen)
        self.state = new_state
        self.history.append(encode(new_state))
        _LOGGER.info("Imported position %s", request.fen)
        return self.position()

    def export_position(self) -> str:
        return encode(self.state)

    # -- MOVES ---
    def attempt_move(self, request: MoveRequest) -> MoveResponse:
        """An accepted move becomes the current position and is appended to the history. A rejected one changes nothing."""
        from_square = Square.from_algebraic(request.from_square)
        to_square = Square.from_algebraic(request.to_square)

        result = attempt_move(self.state, from_square, to_square)
        if result.accepted:
            self.state = result.state
            entry = self.history.append(encode(result.state))
            _LOGGER.debug(
                "Move %s%s stored as history entry %d",
                request.from_square,
                request.to_square,
                entry.index,
            )
        return MoveResponse(
            accepted=result.accepted, reason=result.reason, position=self.position()
        )

    def move(self, from_square: str, to_square: str) -> MoveResponse:
        """Convenience wrapper taking algebraic square names ("e2", "e4")"""
        return self.attempt_move(MoveRequest(from_square=from_square, to_square=to_square))

    def legal_destinations(self, square: str) -> list[str]:
        """Where the piece on `square` may go. Lets a front end highlight targets after a piece got selected."""
        name = square.strip().lower()
        if not is_algebraic_square(name):
            raise InvalidRequestError(f"Cannot interpret {square!r} as a valid square name.")
        from_square = Square.from_algebraic(name)
        return [
            target.to_algebraic()
            for target in legal_destinations(self.state, from_square)
        ]

    # -- HISTORY NAVIGATION ---
    def undo(self) -> Optional[PositionResponse]:
        return self._show(self.history.undo())

    def redo(self) -> Optional[PositionResponse]:
        return self._show(self.history.redo())

    def jump_to(self, index: int) -> Optional[PositionResponse]:
        return self._show(self.history.jump(index))

    def _show(self, entry: Optional[HistoryEntry]) -> Optional[PositionResponse]:
        """None means the navigation was out of range: nothing changed."""
        if entry is None:
            return None
        self.state = decode(entry.fen)
        return self.position()

    # -- HISTORY EXPORT / IMPORT ---
    def export_history(self) -> list[str]:
        return self.history.export_all()

    def history_snapshot(self) -> HistoryResponse:
        return HistoryResponse(fens=self.history.export_all(), cursor=self.history.cursor)

    def import_history(self, fens: list[str] | ImportHistoryRequest) -> PositionResponse:
        """
        Replace the whole history and show its last entry.

        Raises HistoryIoError if the list is empty or any line is not a valid FEN. The current history stays untouched then.
        """
        try:
            request = (
                fens
                if isinstance(fens, ImportHistoryRequest)
                else ImportHistoryRequest(fens=fens)
            )
        except InvalidRequestError as error:
            raise HistoryIoError(str(error)) from error

        states: list[GameState] = []
        for line_number, fen in enumerate(request.fens, start=1):
            try:
                states.append(decode(fen))
            except MalformedFenError as error:
                raise HistoryIoError(
                    f"History entry {line_number} is not a valid FEN: {error}"
                ) from error

        self.history.import_all(request.fens)
        self.state = states[-1]
        _LOGGER.info("Imported history with %d entries", len(request.fens))
        return self.position()

    def save_history(self, repository: HistoryRepository, name: str) -> HistoryModel:
        model = HistoryModel(fens=self.history.export_all(), cursor=self.history.cursor)
        return repository.save_history(name, model)

    def load_history(self, repository: HistoryRepository, name: str) -> PositionResponse:
        """Import a stored history. The cursor is restored when the repository keeps one."""
        model = repository.get_history(name)
        if model is None:
            raise RepositoryError(f"History with {name=} not found.")

        position = self.import_history(model.fens)
        if 0 <= model.cursor < len(model.fens) and model.cursor != self.history.cursor:
            return self.jump_to(model.cursor) or position
        return position
