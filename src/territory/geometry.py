"""Board coordinates, bounds, direction tables and algebraic notation."""

from collections.abc import Iterator
from dataclasses import dataclass

from territory.errors import InvalidSquareError

__all__ = [
    "BOARD_SIZE",
    "FILES",
    "RANKS",
    "Coordinates",
    "ORTHOGONAL",
    "DIAGONAL",
    "KNIGHT_JUMPS",
    "KING_STEPS",
    "in_bounds",
    "all_squares",
    "walk_ray",
    "jump_targets",
    "square_name",
    "parse_square",
]

BOARD_SIZE = 8
FILES = "abcdefgh"
RANKS = "12345678"

# Order matters: move lists and pin scans follow these tables.
ORTHOGONAL = [(0, 1), (0, -1), (1, 0), (-1, 0)]
DIAGONAL = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
KNIGHT_JUMPS = [
    (1, 2), (1, -2), (-1, 2), (-1, -2),
    (2, 1), (2, -1), (-2, 1), (-2, -1),
]
KING_STEPS = ORTHOGONAL + DIAGONAL


def in_bounds(file: int, rank: int) -> bool:
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


@dataclass(frozen=True, order=True)
class Coordinates:
    """A (file, rank) pair, 0-based. Off-board values are allowed and never clamped."""

    file: int
    rank: int

    @property
    def in_bounds(self) -> bool:
        return in_bounds(self.file, self.rank)

    def offset(self, df: int, dr: int) -> "Coordinates":
        return Coordinates(self.file + df, self.rank + dr)

    @property
    def name(self) -> str:
        return square_name(self)

    @classmethod
    def parse(cls, name: str) -> "Coordinates":
        return parse_square(name)

    def __str__(self) -> str:
        if self.in_bounds:
            return square_name(self)
        return f"({self.file}, {self.rank})"


def all_squares() -> Iterator[Coordinates]:
    """Every square in scan order: rank 1 to 8, file a to h within a rank."""
    for rank in range(BOARD_SIZE):
        for file in range(BOARD_SIZE):
            yield Coordinates(file, rank)


def walk_ray(start: Coordinates, direction: tuple[int, int]) -> Iterator[Coordinates]:
    """Yield squares from start (exclusive) along direction until the edge."""
    df, dr = direction
    current = start.offset(df, dr)
    while current.in_bounds:
        yield current
        current = current.offset(df, dr)


def jump_targets(start: Coordinates, table: list[tuple[int, int]]) -> Iterator[Coordinates]:
    """Yield the in-bounds squares reached by each offset of table, in table order."""
    for df, dr in table:
        target = start.offset(df, dr)
        if target.in_bounds:
            yield target


def square_name(coords: Coordinates) -> str:
    """Coordinates(4, 3) -> "e4". Off-board coordinates have no name."""
    if not coords.in_bounds:
        raise InvalidSquareError(f"Off-board coordinates have no square name: {coords}")
    return FILES[coords.file] + RANKS[coords.rank]


def parse_square(name: str) -> Coordinates:
    """"e4" -> Coordinates(4, 3). Anything but a lowercase file and a rank digit is rejected."""
    if not isinstance(name, str) or len(name) != 2:
        raise InvalidSquareError(f"Invalid algebraic notation: {name!r}")
    file_char, rank_char = name[0], name[1]
    if file_char not in FILES or rank_char not in RANKS:
        raise InvalidSquareError(f"Invalid algebraic notation: {name!r}")
    return Coordinates(FILES.index(file_char), RANKS.index(rank_char))
