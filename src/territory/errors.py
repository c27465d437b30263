"""Exceptions raised by the analysis core.

Illegal moves are not errors: they come back as verdicts. These are reserved
for input that cannot be interpreted and for boards that break an invariant.
"""


class TerritoryError(Exception):
    """Base class for all errors raised by this package."""


class InvalidSquareError(TerritoryError, ValueError):
    """Malformed algebraic square, or an off-board coordinate used on a board."""


class InvalidMoveError(TerritoryError, ValueError):
    """Malformed coordinate move notation such as "e2e9" or "e2"."""


class InvalidFenError(TerritoryError, ValueError):
    """FEN string rejected by the parser."""


class InvalidPieceError(TerritoryError, ValueError):
    """Unknown piece symbol, or board contents that are not 64 squares."""


class MissingKingError(TerritoryError):
    """The king a pin scan or legality check depends on is not on the board."""

    def __init__(self, color):
        self.color = color
        super().__init__(f"No {color.value} king on the board")
