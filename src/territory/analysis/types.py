"""Analysis result types and the piece-type keyed direction tables."""

from dataclasses import dataclass, field

from territory.geometry import DIAGONAL, ORTHOGONAL, Coordinates
from territory.model import Color, PieceType


@dataclass(frozen=True)
class Territory:
    """Attacker counts on one square and the side holding the strict majority."""
    controller: Color | None = None
    white_attackers: int = 0
    black_attackers: int = 0

    @property
    def contested(self) -> bool:
        """Both sides attack with equal, non-zero force (controller is None)."""
        return self.white_attackers == self.black_attackers and self.white_attackers > 0

    def attackers(self, color: Color) -> int:
        return self.white_attackers if color is Color.WHITE else self.black_attackers

    def add_attacker(self, color: Color) -> "Territory":
        white = self.white_attackers + (color is Color.WHITE)
        black = self.black_attackers + (color is Color.BLACK)
        return Territory(_controller(white, black), white, black)


def _controller(white: int, black: int) -> Color | None:
    if white > black:
        return Color.WHITE
    if black > white:
        return Color.BLACK
    return None


@dataclass(frozen=True)
class Pin:
    pinned_square: Coordinates
    pinning_square: Coordinates  # enemy slider behind the pinned piece


@dataclass
class AnalysisResult:
    territory: dict[str, Territory]      # algebraic square -> Territory, all 64 squares
    attacked_pieces: dict[str, Color]    # enemy-occupied square -> attacking color
    pins: list[Pin] = field(default_factory=list)


_RAY_DIRS: dict[PieceType, list[tuple[int, int]]] = {
    PieceType.ROOK: ORTHOGONAL,
    PieceType.BISHOP: DIAGONAL,
    PieceType.QUEEN: ORTHOGONAL + DIAGONAL,
}
