"""
Geometry/Base movement and capturing/attacking rules

Key idea: Use strategy pattern to define the move shape and the attack pattern for each piece type.

Whether a move is legal (your turn, not leaving your own king in check, castling eligibility) is decided later by the validator.
"""

from dataclasses import dataclass
from typing import Callable, Self

from fenboard.chess.board import Board
from fenboard.chess.pieces import Color, Piece, PieceType
from fenboard.chess.position import GameState
from fenboard.chess.square import BOARD_DIMENSIONS, Square

Vector = tuple[int, int]

KNIGHT_DELTAS: tuple[Vector, ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
)
KING_DELTAS: tuple[Vector, ...] = (
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)
STRAIGHTS: tuple[Vector, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIAGONALS: tuple[Vector, ...] = ((1, 1), (-1, 1), (1, -1), (-1, -1))

# White moves UP the board (towards row 0), black moves DOWN.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_HOME_ROW: dict[Color, int] = {
    Color.WHITE: BOARD_DIMENSIONS[0] - 2,
    Color.BLACK: 1,
}
PROMOTION_ROW: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: BOARD_DIMENSIONS[0] - 1}


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_algebraic(cls, notation: str) -> Self:
        """
        Coordinate notation: <from square><to square>, ex. "e2e4" moves the piece that was on e2 to e4.
        Castling is written as the king move ("e1g1").
        """
        return cls(Square.from_algebraic(notation[:2]), Square.from_algebraic(notation[2:4]))

    def to_algebraic(self) -> str:
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}"

    @property
    def row_delta(self) -> int:
        return self.to_square.row - self.from_square.row

    @property
    def col_delta(self) -> int:
        return self.to_square.col - self.from_square.col


# --- PATH HELPERS ---
def squares_between(from_square: Square, to_square: Square) -> list[Square]:
    """
    Find the squares strictly in between two squares on the same rank, file or diagonal.

    Needed for checking if a sliding piece's path is clear (the Board will check which of those are empty).
    """
    d_row = to_square.row - from_square.row
    d_col = to_square.col - from_square.col
    if not (d_row == 0 or d_col == 0 or abs(d_row) == abs(d_col)):
        raise ValueError(
            f"squares_between requires both squares to lie on one line. \n from: {from_square}\n to:{to_square}"
        )

    step_row = (d_row > 0) - (d_row < 0)
    step_col = (d_col > 0) - (d_col < 0)
    squares_found: list[Square] = []
    square = from_square.offset(step_row, step_col)
    while square != to_square:
        squares_found.append(square)
        square = square.offset(step_row, step_col)
    return squares_found


def is_path_clear(board: Board, from_square: Square, to_square: Square) -> bool:
    return not board.is_any_occupied(squares_between(from_square, to_square))


# --- MOVEMENT RULES (shape of a move) ---
def is_pawn_move(move: Move, state: GameState) -> bool:
    """
    A pawn:
    - moves by a single square forward onto an empty square.
    - It can move by two in their first move (so when on their home rank), if both squares are empty
    - takes diagonally (one square forward)
    - takes en passant: diagonally onto the en passant target square
    """
    board = state.board
    pawn = board.piece(move.from_square)
    assert pawn is not None
    direction = PAWN_DIRECTION[pawn.color]

    # pawn pushes
    if move.col_delta == 0:
        if move.row_delta == direction:
            return board.is_empty(move.to_square)
        if (
            move.row_delta == 2 * direction
            and move.from_square.row == PAWN_HOME_ROW[pawn.color]
        ):
            skipped_square = move.from_square.offset(direction, 0)
            return board.is_empty(skipped_square) and board.is_empty(move.to_square)
        return False

    # pawns take diagonally
    if abs(move.col_delta) == 1 and move.row_delta == direction:
        target = board.piece(move.to_square)
        if target is not None:
            return target.color != pawn.color
        return is_en_passant_capture(move, state)
    return False


def is_knight_move(move: Move, state: GameState) -> bool:
    """Knights always move such that |delta_row| + |delta_col| = 3 (and jump over whatever is in between)"""
    return (move.row_delta, move.col_delta) in KNIGHT_DELTAS


def is_bishop_move(move: Move, state: GameState) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|, and the squares in between must be empty"""
    if abs(move.row_delta) != abs(move.col_delta) or move.row_delta == 0:
        return False
    return is_path_clear(state.board, move.from_square, move.to_square)


def is_rook_move(move: Move, state: GameState) -> bool:
    """Rooks move either horizontally or vertically, and the squares in between must be empty"""
    if (move.row_delta != 0) == (move.col_delta != 0):
        return False
    return is_path_clear(state.board, move.from_square, move.to_square)


def is_queen_move(move: Move, state: GameState) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return is_rook_move(move, state) or is_bishop_move(move, state)


def is_king_move(move: Move, state: GameState) -> bool:
    """
    The king can move by a single square at the time.

    Castling is modelled as a special king move (handled separately, see is_castling_shape).
    """
    return (move.row_delta, move.col_delta) in KING_DELTAS


def is_castling_shape(move: Move, piece: Piece) -> bool:
    """A king moving two squares along its rank. Eligibility is decided by the special move handler."""
    return (
        piece.type == PieceType.KING
        and move.row_delta == 0
        and abs(move.col_delta) == 2
    )


def is_en_passant_capture(move: Move, state: GameState) -> bool:
    """A diagonal pawn step landing exactly on the current en passant target."""
    if state.en_passant_square is None or move.to_square != state.en_passant_square:
        return False
    pawn = state.board.piece(move.from_square)
    if pawn is None or pawn.type != PieceType.PAWN:
        return False
    if abs(move.col_delta) != 1 or move.row_delta != PAWN_DIRECTION[pawn.color]:
        return False
    victim = state.board.piece(en_passant_victim_square(move))
    return state.board.is_empty(move.to_square) and victim == Piece(
        PieceType.PAWN, pawn.color.opponent
    )


def en_passant_victim_square(move: Move) -> Square:
    """The pawn taken en passant stands on the target's file, on the rank the capturing pawn started from."""
    return Square(move.from_square.row, move.to_square.col)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MoveShapeFn = Callable[[Move, GameState], bool]
MOVEMENT_RULES: dict[PieceType, MoveShapeFn] = {
    PieceType.PAWN: is_pawn_move,
    PieceType.KNIGHT: is_knight_move,
    PieceType.BISHOP: is_bishop_move,
    PieceType.ROOK: is_rook_move,
    PieceType.QUEEN: is_queen_move,
    PieceType.KING: is_king_move,
}


# --- CAPTURING RULES / ATTACKING RULES ---
def raycasting_attack(
    square: Square,
    by_color: Color,
    by_piece_type: PieceType,
    board: Board,
    directions: tuple[Vector, ...],
) -> bool:
    """
    Raycasting algorithm for attacks.
    ---

    Determines:
    _"Is the specified square in the line-of-sight of a piece of the specified color and type,
    that is allowed to move along the given directions?"_

    We walk along each direction until we hit another piece or the edge of the board.

    ---
    Returns TRUE if the first piece encountered is of the specified color and type.
    """
    for d_row, d_col in directions:
        target_square = square.offset(d_row, d_col)
        while target_square.is_within_bounds():
            piece_found = board.piece(target_square)
            if piece_found is not None:
                # only the first occupied square matters: everything behind it is blocked.
                if piece_found == Piece(by_piece_type, by_color):
                    return True
                break
            target_square = target_square.offset(d_row, d_col)
    return False


def single_step_attack(
    square: Square,
    by_color: Color,
    by_piece_type: PieceType,
    board: Board,
    deltas: tuple[Vector, ...],
) -> bool:
    """
    Raycasting is for sliding pieces. This is the equivalent for pawns, kings, and knights that just can move a single step along a direction.

    ---
    Returns TRUE if a piece of the specified color and type stands one step away along any of the deltas.
    """
    for d_row, d_col in deltas:
        target_square = square.offset(d_row, d_col)
        if not target_square.is_within_bounds():
            continue
        if board.piece(target_square) == Piece(by_piece_type, by_color):
            return True
    return False


def is_attacked_by_pawn(square: Square, by_color: Color, board: Board) -> bool:
    """
    Pawns take diagonally
    ----

    NOTE: Pawn moves are not symmetric, so to check IF a white pawn could take on your square -->
    Must look one rank DOWN the board (one row higher). That is, you are asking "Could a white pawn, that moves UP the board, take on the specified square?"

    The attack counts regardless of whether the square is occupied.
    """
    d_row = -PAWN_DIRECTION[by_color]
    inverse_pawn_take_deltas: tuple[Vector, ...] = ((d_row, 1), (d_row, -1))
    return single_step_attack(
        square, by_color, PieceType.PAWN, board, inverse_pawn_take_deltas
    )


def is_attacked_by_knight(square: Square, by_color: Color, board: Board) -> bool:
    return single_step_attack(square, by_color, PieceType.KNIGHT, board, KNIGHT_DELTAS)


def is_attacked_by_bishop(square: Square, by_color: Color, board: Board) -> bool:
    return raycasting_attack(square, by_color, PieceType.BISHOP, board, DIAGONALS)


def is_attacked_by_rook(square: Square, by_color: Color, board: Board) -> bool:
    return raycasting_attack(square, by_color, PieceType.ROOK, board, STRAIGHTS)


def is_attacked_by_queen(square: Square, by_color: Color, board: Board) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return raycasting_attack(
        square, by_color, PieceType.QUEEN, board, STRAIGHTS + DIAGONALS
    )


def is_attacked_by_king(square: Square, by_color: Color, board: Board) -> bool:
    return single_step_attack(square, by_color, PieceType.KING, board, KING_DELTAS)


# --- STRATEGY PATTERN: ATTACKING RULES ---
IsAttackedFn = Callable[[Square, Color, Board], bool]
ATTACK_RULES: dict[PieceType, IsAttackedFn] = {
    PieceType.PAWN: is_attacked_by_pawn,
    PieceType.KNIGHT: is_attacked_by_knight,
    PieceType.BISHOP: is_attacked_by_bishop,
    PieceType.ROOK: is_attacked_by_rook,
    PieceType.QUEEN: is_attacked_by_queen,
    PieceType.KING: is_attacked_by_king,
}
