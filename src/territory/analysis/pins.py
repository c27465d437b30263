"""Pins against a king: a friendly piece with an enemy slider right behind it."""

from territory.analysis.types import Pin, _RAY_DIRS
from territory.geometry import DIAGONAL, ORTHOGONAL, Coordinates, walk_ray
from territory.model import Board, Color, PieceType

__all__ = ["find_pins"]

# Sliders whose attack runs along each ray family.
_ORTHOGONAL_PINNERS = frozenset(pt for pt, dirs in _RAY_DIRS.items() if ORTHOGONAL[0] in dirs)
_DIAGONAL_PINNERS = frozenset(pt for pt, dirs in _RAY_DIRS.items() if DIAGONAL[0] in dirs)


def _walk_ray(
    board: Board,
    start_sq: Coordinates,
    direction: tuple[int, int],
) -> tuple[Coordinates | None, Coordinates | None]:
    """First and second occupied squares along the ray; None where the edge comes first."""
    first = None
    for sq in walk_ray(start_sq, direction):
        if board.piece_at(sq) is not None:
            if first is None:
                first = sq
            else:
                return first, sq
    return first, None


def _pinners_for(direction: tuple[int, int]) -> frozenset[PieceType]:
    df, dr = direction
    return _ORTHOGONAL_PINNERS if df == 0 or dr == 0 else _DIAGONAL_PINNERS


def find_pins(color: Color, board: Board) -> list[Pin]:
    """Pins of color's pieces to color's own king.

    Each of the eight rays from the king is walked outward. The first piece
    met must be friendly (an enemy there blocks the line and ends the ray);
    the second must then be an enemy slider that attacks along this ray. The
    ray ends at the second piece whether it pins or not.

    Raises MissingKingError when color has no king on the board.
    """
    king_sq = board.require_king(color)
    pins: list[Pin] = []

    for direction in ORTHOGONAL + DIAGONAL:
        first_sq, second_sq = _walk_ray(board, king_sq, direction)
        if first_sq is None or second_sq is None:
            continue

        if board.piece_at(first_sq).color is not color:
            continue

        pinner = board.piece_at(second_sq)
        if pinner.color is not color and pinner.type in _pinners_for(direction):
            pins.append(Pin(pinned_square=first_sq, pinning_square=second_sq))

    return pins
