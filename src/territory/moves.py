"""Pseudo-legal move generation.

Movement differs from sight: pawns push straight ahead and capture only onto
enemy pieces, and no piece may land on a friendly one. Nothing here checks
whether the mover's king ends up attacked; that is legality.py's job.
"""

from collections.abc import Callable

from territory.analysis.types import _RAY_DIRS
from territory.geometry import KING_STEPS, KNIGHT_JUMPS, Coordinates, jump_targets, walk_ray
from territory.model import Board, Color, Move, Piece, PieceType

__all__ = ["pseudo_legal_moves", "PAWN_START_RANK"]

PAWN_START_RANK = {Color.WHITE: 1, Color.BLACK: 6}


def _pawn_moves(piece: Piece, square: Coordinates, board: Board) -> list[Move]:
    moves = []
    forward = piece.color.forward

    one_step = square.offset(0, forward)
    if one_step.in_bounds and board.piece_at(one_step) is None:
        moves.append(Move(square, one_step))
        two_step = one_step.offset(0, forward)
        if (square.rank == PAWN_START_RANK[piece.color]
                and two_step.in_bounds
                and board.piece_at(two_step) is None):
            moves.append(Move(square, two_step))

    for target in jump_targets(square, [(-1, forward), (1, forward)]):
        occupant = board.piece_at(target)
        if occupant is not None and occupant.color is not piece.color:
            moves.append(Move(square, target))
    return moves


def _jump_moves(piece: Piece, square: Coordinates, board: Board, table) -> list[Move]:
    moves = []
    for target in jump_targets(square, table):
        occupant = board.piece_at(target)
        if occupant is None or occupant.color is not piece.color:
            moves.append(Move(square, target))
    return moves


def _knight_moves(piece: Piece, square: Coordinates, board: Board) -> list[Move]:
    return _jump_moves(piece, square, board, KNIGHT_JUMPS)


def _king_moves(piece: Piece, square: Coordinates, board: Board) -> list[Move]:
    return _jump_moves(piece, square, board, KING_STEPS)


def _slider_moves(piece: Piece, square: Coordinates, board: Board) -> list[Move]:
    moves = []
    for direction in _RAY_DIRS[piece.type]:
        for target in walk_ray(square, direction):
            occupant = board.piece_at(target)
            if occupant is None:
                moves.append(Move(square, target))
                continue
            if occupant.color is not piece.color:
                moves.append(Move(square, target))
            break
    return moves


_MOVERS: dict[PieceType, Callable[[Piece, Coordinates, Board], list[Move]]] = {
    PieceType.PAWN: _pawn_moves,
    PieceType.KNIGHT: _knight_moves,
    PieceType.BISHOP: _slider_moves,
    PieceType.ROOK: _slider_moves,
    PieceType.QUEEN: _slider_moves,
    PieceType.KING: _king_moves,
}


def pseudo_legal_moves(square: Coordinates, board: Board) -> list[Move]:
    """Moves for the piece on square, in direction-table order.

    An empty square has no moves. The promotion field is always None; a pawn
    reaching the last rank still needs the caller to pick a piece.
    """
    piece = board.piece_at(square)
    if piece is None:
        return []
    return _MOVERS[piece.type](piece, square, board)
