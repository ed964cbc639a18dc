"""The fixed set of games and the order they appear in the report."""

from __future__ import annotations

from typing import Dict, Tuple

from .base import GameDefinition
from .connections import CONNECTIONS, SPORTS_CONNECTIONS
from .crossword import CROSSWORD, MINI
from .letter_boxed import LETTER_BOXED
from .spelling_bee import SPELLING_BEE
from .strands import STRANDS
from .sudoku import SUDOKU
from .wordle import WORDLE

REPORT_GAMES: Tuple[GameDefinition, ...] = (
    WORDLE,
    CONNECTIONS,
    SPORTS_CONNECTIONS,
    LETTER_BOXED,
    STRANDS,
    MINI,
    CROSSWORD,
    SPELLING_BEE,
)

ALL_GAMES: Dict[str, GameDefinition] = {
    definition.key: definition for definition in REPORT_GAMES + (SUDOKU,)
}


def get_definition(key: str) -> GameDefinition:
    try:
        return ALL_GAMES[key]
    except KeyError:
        known = ", ".join(sorted(ALL_GAMES))
        raise ValueError(f"Unknown game '{key}'. Known games: {known}") from None
