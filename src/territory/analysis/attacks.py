"""Attack sight: the squares each piece threatens or defends.

Sight is not movement. A pawn sees its two forward diagonals whether or not
anything stands there, and a slider sees the first piece on each ray, friend
or foe.
"""

from collections.abc import Callable, Iterator

from territory.analysis.types import _RAY_DIRS
from territory.geometry import KING_STEPS, KNIGHT_JUMPS, Coordinates, jump_targets, walk_ray
from territory.model import Board, Color, Piece, PieceType

__all__ = [
    "attacked_squares",
    "attack_map",
    "attackers_of",
]


def _sliding_sight(
    square: Coordinates,
    board: Board,
    directions: list[tuple[int, int]],
) -> set[Coordinates]:
    seen = set()
    for direction in directions:
        for target in walk_ray(square, direction):
            seen.add(target)
            if board.piece_at(target) is not None:
                break
    return seen


def _pawn_sight(piece: Piece, square: Coordinates, board: Board) -> set[Coordinates]:
    forward = piece.color.forward
    return set(jump_targets(square, [(-1, forward), (1, forward)]))


def _knight_sight(piece: Piece, square: Coordinates, board: Board) -> set[Coordinates]:
    return set(jump_targets(square, KNIGHT_JUMPS))


def _king_sight(piece: Piece, square: Coordinates, board: Board) -> set[Coordinates]:
    return set(jump_targets(square, KING_STEPS))


def _slider_sight(piece: Piece, square: Coordinates, board: Board) -> set[Coordinates]:
    return _sliding_sight(square, board, _RAY_DIRS[piece.type])


_SIGHT: dict[PieceType, Callable[[Piece, Coordinates, Board], set[Coordinates]]] = {
    PieceType.PAWN: _pawn_sight,
    PieceType.KNIGHT: _knight_sight,
    PieceType.BISHOP: _slider_sight,
    PieceType.ROOK: _slider_sight,
    PieceType.QUEEN: _slider_sight,
    PieceType.KING: _king_sight,
}


def attacked_squares(piece: Piece, square: Coordinates, board: Board) -> frozenset[Coordinates]:
    """Squares the piece on square attacks on this board."""
    return frozenset(_SIGHT[piece.type](piece, square, board))


def attack_map(board: Board) -> Iterator[tuple[Coordinates, Piece, frozenset[Coordinates]]]:
    """(square, piece, sight) for every occupied square, in scan order."""
    for square, piece in board.pieces():
        yield square, piece, attacked_squares(piece, square, board)


def attackers_of(target: Coordinates, color: Color, board: Board) -> list[Coordinates]:
    """Squares of color's pieces whose sight includes target, in scan order."""
    return [
        square
        for square, piece, sight in attack_map(board)
        if piece.color is color and target in sight
    ]
