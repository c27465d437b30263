"""Square control: attacker counts per square and the pieces under attack."""

import logging

from territory.analysis.attacks import attack_map
from territory.analysis.pins import find_pins
from territory.analysis.types import AnalysisResult, Territory
from territory.geometry import Coordinates, all_squares, square_name
from territory.model import Board, Color

__all__ = [
    "analyze",
    "territory_map",
    "controlled_squares",
    "is_in_check",
]

logger = logging.getLogger(__name__)


def _fold(board: Board) -> tuple[dict[Coordinates, Territory], dict[str, Color]]:
    territory = {sq: Territory() for sq in all_squares()}
    attacked_pieces: dict[str, Color] = {}

    for square, piece, sight in attack_map(board):
        for target in sight:
            territory[target] = territory[target].add_attacker(piece.color)
            occupant = board.piece_at(target)
            if occupant is not None and occupant.color is not piece.color:
                # Only the occupant's opponent can write here, so the last
                # write always agrees with every earlier one.
                attacked_pieces[square_name(target)] = piece.color

    return territory, attacked_pieces


def territory_map(board: Board) -> dict[Coordinates, Territory]:
    """Territory for all 64 squares, keyed by Coordinates."""
    territory, _ = _fold(board)
    return territory


def analyze(board: Board) -> AnalysisResult:
    """Territory, attacked enemy pieces and king pins for a board.

    Pins are reported for each color whose king is on the board, White first.
    A board without kings still gets its territory analyzed.
    """
    territory, attacked_pieces = _fold(board)

    pins = []
    for color in (Color.WHITE, Color.BLACK):
        if board.find_king(color) is not None:
            pins.extend(find_pins(color, board))

    logger.debug(
        "Analyzed board: %d attacked pieces, %d pins",
        len(attacked_pieces), len(pins),
    )
    return AnalysisResult(
        territory={square_name(sq): t for sq, t in territory.items()},
        attacked_pieces=attacked_pieces,
        pins=pins,
    )


def controlled_squares(result: AnalysisResult, color: Color) -> list[str]:
    """Squares color holds by strict majority, in scan order."""
    return [name for name, t in result.territory.items() if t.controller is color]


def is_in_check(board: Board, color: Color) -> bool:
    """Whether color's king stands on a square the other side attacks.

    Raises MissingKingError when color has no king.
    """
    king = board.require_king(color)
    return territory_map(board)[king].attackers(color.other) > 0
