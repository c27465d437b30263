"""Move legality by simulation: play the move on a copy, then re-analyze.

A move is legal when, on the board after it, the other side has no attacker on
the mover's king square. Movement geometry is not checked here; pair this with
pseudo_legal_moves (legal_moves does exactly that).
"""

import enum
import logging
from dataclasses import dataclass

from territory.analysis.territory import analyze, is_in_check
from territory.geometry import Coordinates, square_name
from territory.model import Move, Position
from territory.moves import pseudo_legal_moves

__all__ = [
    "GameStatus",
    "MoveVerdict",
    "Reason",
    "check_move",
    "game_status",
    "is_legal",
    "legal_moves",
]

logger = logging.getLogger(__name__)


class Reason(enum.Enum):
    OK = "ok"
    OFF_BOARD = "off_board"
    NO_PIECE = "no_piece"
    WRONG_TURN = "wrong_turn"
    OWN_PIECE = "own_piece"  # destination holds one of the mover's pieces
    KING_EXPOSED = "king_exposed"


class GameStatus(enum.Enum):
    IN_PROGRESS = "in_progress"
    CHECK = "check"


@dataclass(frozen=True)
class MoveVerdict:
    move: Move
    reason: Reason

    @property
    def legal(self) -> bool:
        return self.reason is Reason.OK


def _verdict(move: Move, reason: Reason) -> MoveVerdict:
    logger.debug("Move %s: %s", move, reason.value)
    return MoveVerdict(move, reason)


def check_move(position: Position, move: Move) -> MoveVerdict:
    """Legality verdict with the reason a move was rejected.

    Raises MissingKingError if the side to move has no king, which no
    well-formed game produces.
    """
    if not (move.from_square.in_bounds and move.to_square.in_bounds):
        return _verdict(move, Reason.OFF_BOARD)

    board = position.board
    piece = board.piece_at(move.from_square)
    if piece is None:
        return _verdict(move, Reason.NO_PIECE)
    if piece.color is not position.turn:
        return _verdict(move, Reason.WRONG_TURN)
    target = board.piece_at(move.to_square)
    if target is not None and target.color is piece.color:
        return _verdict(move, Reason.OWN_PIECE)

    board.require_king(piece.color)
    # The mover itself lands on the target; a promotion suffix never changes
    # whose king is on the board.
    board_after = board.copy().set(move.to_square, piece).clear(move.from_square)
    analysis_after = analyze(board_after)
    king = board_after.require_king(piece.color)
    if analysis_after.territory[square_name(king)].attackers(piece.color.other) > 0:
        return _verdict(move, Reason.KING_EXPOSED)
    return _verdict(move, Reason.OK)


def is_legal(position: Position, move: Move) -> bool:
    return check_move(position, move).legal


def legal_moves(position: Position, square: Coordinates) -> list[Move]:
    """Pseudo-legal moves from square that keep the mover's king safe.

    Empty when square is empty or holds a piece of the side not to move.
    """
    return [m for m in pseudo_legal_moves(square, position.board) if is_legal(position, m)]


def game_status(position: Position) -> GameStatus:
    """CHECK when the side to move is attacked. Mate and stalemate are not classified."""
    if is_in_check(position.board, position.turn):
        return GameStatus.CHECK
    return GameStatus.IN_PROGRESS
