"""Chess board analysis: square control, pins, pseudo-legal moves and legality."""

from territory.analysis import AnalysisResult, Pin, Territory, analyze, attacked_squares, find_pins
from territory.errors import (
    InvalidFenError,
    InvalidMoveError,
    InvalidPieceError,
    InvalidSquareError,
    MissingKingError,
    TerritoryError,
)
from territory.geometry import Coordinates, parse_square, square_name
from territory.legality import GameStatus, MoveVerdict, Reason, check_move, game_status, is_legal, legal_moves
from territory.model import Board, Color, Move, Piece, PieceType, Position
from territory.moves import pseudo_legal_moves

__all__ = [
    "AnalysisResult",
    "Board",
    "Color",
    "Coordinates",
    "GameStatus",
    "InvalidFenError",
    "InvalidMoveError",
    "InvalidPieceError",
    "InvalidSquareError",
    "MissingKingError",
    "Move",
    "MoveVerdict",
    "Piece",
    "PieceType",
    "Pin",
    "Position",
    "Reason",
    "Territory",
    "TerritoryError",
    "analyze",
    "attacked_squares",
    "check_move",
    "find_pins",
    "game_status",
    "is_legal",
    "legal_moves",
    "parse_square",
    "pseudo_legal_moves",
    "square_name",
]
