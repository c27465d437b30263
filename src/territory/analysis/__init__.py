"""Pure-function board analysis.

All functions take a Board and return typed dataclass instances. No I/O and
no hidden state: the same board always yields the same result.
"""

from territory.analysis.attacks import attack_map, attacked_squares, attackers_of
from territory.analysis.pins import find_pins
from territory.analysis.territory import analyze, controlled_squares, is_in_check, territory_map
from territory.analysis.types import AnalysisResult, Pin, Territory

__all__ = [
    "AnalysisResult",
    "Pin",
    "Territory",
    "analyze",
    "attack_map",
    "attacked_squares",
    "attackers_of",
    "controlled_squares",
    "find_pins",
    "is_in_check",
    "territory_map",
]
