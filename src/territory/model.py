"""Value types: colors, pieces, moves, the board and a position to move from.

Board is immutable. Every "write" returns a new Board, so simulating a move can
never leak into the board it started from.
"""

import enum
from collections.abc import Iterator
from dataclasses import dataclass

from territory.errors import InvalidMoveError, InvalidPieceError, InvalidSquareError, MissingKingError
from territory.geometry import BOARD_SIZE, Coordinates, all_squares, parse_square, square_name

__all__ = [
    "Color",
    "PieceType",
    "Piece",
    "Move",
    "Board",
    "Position",
]


class Color(enum.Enum):
    WHITE = "white"
    BLACK = "black"

    @property
    def other(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        """Rank direction pawns of this color advance in."""
        return 1 if self is Color.WHITE else -1


class PieceType(enum.Enum):
    PAWN = "p"
    KNIGHT = "n"
    BISHOP = "b"
    ROOK = "r"
    QUEEN = "q"
    KING = "k"

    @property
    def is_slider(self) -> bool:
        return self in (PieceType.BISHOP, PieceType.ROOK, PieceType.QUEEN)


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color

    def symbol(self) -> str:
        """FEN letter: upper case for White, lower case for Black."""
        letter = self.type.value
        return letter.upper() if self.color is Color.WHITE else letter

    @classmethod
    def from_symbol(cls, symbol: str) -> "Piece":
        try:
            piece_type = PieceType(symbol.lower())
        except ValueError:
            raise InvalidPieceError(f"Invalid piece symbol: {symbol!r}") from None
        color = Color.WHITE if symbol.isupper() else Color.BLACK
        return cls(piece_type, color)

    def __str__(self) -> str:
        return self.symbol()


@dataclass(frozen=True)
class Move:
    from_square: Coordinates
    to_square: Coordinates
    promotion: PieceType | None = None

    def notation(self) -> str:
        """Coordinate notation, e.g. "e2e4" or "e7e8q"."""
        text = square_name(self.from_square) + square_name(self.to_square)
        if self.promotion is not None:
            text += self.promotion.value
        return text

    @classmethod
    def parse(cls, text: str) -> "Move":
        if not isinstance(text, str) or len(text) not in (4, 5):
            raise InvalidMoveError(f"Invalid move notation: {text!r}")
        try:
            from_square = parse_square(text[0:2])
            to_square = parse_square(text[2:4])
        except InvalidSquareError as e:
            raise InvalidMoveError(f"Invalid move notation: {text!r}") from e
        promotion = None
        if len(text) == 5:
            try:
                promotion = PieceType(text[4])
            except ValueError:
                raise InvalidMoveError(f"Invalid promotion piece in {text!r}") from None
            if promotion in (PieceType.PAWN, PieceType.KING):
                raise InvalidMoveError(f"Cannot promote to {promotion.name.lower()}: {text!r}")
        return cls(from_square, to_square, promotion)

    def __str__(self) -> str:
        # Coordinates render off-board values too, unlike notation()
        text = f"{self.from_square}{self.to_square}"
        if self.promotion is not None:
            text += self.promotion.value
        return text


_BACK_RANK = [
    PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
    PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
]


def _index(coords: Coordinates) -> int:
    if not coords.in_bounds:
        raise InvalidSquareError(f"Coordinates off the board: {coords}")
    return coords.rank * BOARD_SIZE + coords.file


class Board:
    """8x8 grid of optional pieces, stored rank by rank from a1."""

    __slots__ = ("_squares",)

    def __init__(self, squares=None):
        if squares is None:
            squares = (None,) * (BOARD_SIZE * BOARD_SIZE)
        squares = tuple(squares)
        if len(squares) != BOARD_SIZE * BOARD_SIZE:
            raise InvalidPieceError(f"A board has 64 squares, got {len(squares)}")
        self._squares = squares

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def initial(cls) -> "Board":
        """The standard starting position."""
        squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)
        for file, piece_type in enumerate(_BACK_RANK):
            squares[file] = Piece(piece_type, Color.WHITE)
            squares[BOARD_SIZE + file] = Piece(PieceType.PAWN, Color.WHITE)
            squares[6 * BOARD_SIZE + file] = Piece(PieceType.PAWN, Color.BLACK)
            squares[7 * BOARD_SIZE + file] = Piece(piece_type, Color.BLACK)
        return cls(squares)

    @classmethod
    def from_pieces(cls, placement: dict[str, str]) -> "Board":
        """Build a board from {"e1": "K", "e8": "q", ...}."""
        board = cls()
        for name, symbol in placement.items():
            board = board.set(parse_square(name), Piece.from_symbol(symbol))
        return board

    def piece_at(self, coords: Coordinates) -> Piece | None:
        return self._squares[_index(coords)]

    def set(self, coords: Coordinates, piece: Piece | None) -> "Board":
        """Return a new board with piece (or nothing) on coords."""
        squares = list(self._squares)
        squares[_index(coords)] = piece
        return Board(squares)

    def clear(self, coords: Coordinates) -> "Board":
        return self.set(coords, None)

    def apply(self, move: Move) -> "Board":
        """Return the board after move: the mover overwrites the target, the origin empties.

        A promotion type replaces a moving pawn; any other piece given one raises
        InvalidMoveError. Nothing else (castling rook, en passant pawn) is touched.
        """
        piece = self.piece_at(move.from_square)
        if piece is None:
            raise InvalidMoveError(f"No piece on {move.from_square} to move")
        if move.promotion is not None:
            if piece.type is not PieceType.PAWN:
                raise InvalidMoveError(f"Only a pawn can promote, not {piece.symbol()} in {move}")
            piece = Piece(move.promotion, piece.color)
        squares = list(self._squares)
        squares[_index(move.to_square)] = piece
        squares[_index(move.from_square)] = None
        return Board(squares)

    def copy(self) -> "Board":
        return Board(self._squares)

    def pieces(self) -> Iterator[tuple[Coordinates, Piece]]:
        """Occupied squares in scan order."""
        for coords in all_squares():
            piece = self._squares[_index(coords)]
            if piece is not None:
                yield coords, piece

    def find_king(self, color: Color) -> Coordinates | None:
        for coords, piece in self.pieces():
            if piece.type is PieceType.KING and piece.color is color:
                return coords
        return None

    def require_king(self, color: Color) -> Coordinates:
        king = self.find_king(color)
        if king is None:
            raise MissingKingError(color)
        return king

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __str__(self) -> str:
        rows = []
        for rank in reversed(range(BOARD_SIZE)):
            row = self._squares[rank * BOARD_SIZE:(rank + 1) * BOARD_SIZE]
            rows.append(" ".join(p.symbol() if p else "." for p in row))
        return "\n".join(rows)

    def __repr__(self) -> str:
        occupied = ", ".join(f"{square_name(c)}={p.symbol()}" for c, p in self.pieces())
        return f"Board({occupied})"


@dataclass(frozen=True)
class Position:
    """A board plus the side to move: all a legality check needs to know about a game."""

    board: Board
    turn: Color = Color.WHITE

    @classmethod
    def initial(cls) -> "Position":
        return cls(Board.initial(), Color.WHITE)

    def play(self, move: Move) -> "Position":
        """Apply move without validating it and hand the turn to the other side."""
        return Position(self.board.apply(move), self.turn.other)
