"""JSON-ready views of analysis results, move lists and verdicts.

Squares become algebraic names and colors their lowercase names; everything
else is plain dicts, lists, ints and bools.
"""

from territory.analysis.types import AnalysisResult, Pin, Territory
from territory.geometry import square_name
from territory.legality import MoveVerdict
from territory.model import Color, Move

__all__ = [
    "serialize_analysis",
    "serialize_moves",
    "serialize_verdict",
]


def _color_name(color: Color | None) -> str | None:
    return color.value if color is not None else None


def _serialize_territory(territory: Territory) -> dict:
    return {
        "controller": _color_name(territory.controller),
        "white_attackers": territory.white_attackers,
        "black_attackers": territory.black_attackers,
        "contested": territory.contested,
    }


def _serialize_pin(pin: Pin) -> dict:
    return {
        "pinned": square_name(pin.pinned_square),
        "pinner": square_name(pin.pinning_square),
    }


def serialize_analysis(result: AnalysisResult, include_pins: bool = True) -> dict:
    data = {
        "territory": {name: _serialize_territory(t) for name, t in result.territory.items()},
        "attacked_pieces": {name: _color_name(c) for name, c in result.attacked_pieces.items()},
    }
    if include_pins:
        data["pins"] = [_serialize_pin(p) for p in result.pins]
    return data


def serialize_moves(moves: list[Move]) -> list[str]:
    return [m.notation() for m in moves]


def serialize_verdict(verdict: MoveVerdict) -> dict:
    return {
        "move": verdict.move.notation(),
        "legal": verdict.legal,
        "reason": verdict.reason.value,
    }
