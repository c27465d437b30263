"""FEN import and export through python-chess.

Only placement and side to move carry over. Castling rights, en passant and
the move counters have no place in a Position and are dropped on import.
"""

import chess

from territory.errors import InvalidFenError
from territory.geometry import Coordinates, all_squares
from territory.model import Board, Color, Piece, Position

__all__ = [
    "position_from_fen",
    "position_to_fen",
    "from_chess_board",
    "to_chess_board",
    "to_chess_square",
]


def from_chess_board(board: chess.Board) -> Position:
    squares = []
    for coords in all_squares():
        piece = board.piece_at(to_chess_square(coords))
        squares.append(Piece.from_symbol(piece.symbol()) if piece else None)
    turn = Color.WHITE if board.turn == chess.WHITE else Color.BLACK
    return Position(Board(squares), turn)


def to_chess_board(position: Position) -> chess.Board:
    board = chess.Board(None)
    for coords, piece in position.board.pieces():
        board.set_piece_at(
            to_chess_square(coords),
            chess.Piece.from_symbol(piece.symbol()),
        )
    board.turn = chess.WHITE if position.turn is Color.WHITE else chess.BLACK
    return board


def position_from_fen(fen: str) -> Position:
    try:
        board = chess.Board(fen)
    except ValueError as e:
        raise InvalidFenError(f"Invalid FEN: {fen}") from e
    return from_chess_board(board)


def position_to_fen(position: Position) -> str:
    return to_chess_board(position).fen()


def to_chess_square(coords: Coordinates) -> chess.Square:
    return chess.square(coords.file, coords.rank)
