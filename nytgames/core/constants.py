"""Shared constants and enumerations for the puzzle fetchers."""

from __future__ import annotations

from enum import Enum

HOST = "https://www.nytimes.com"

DATE_FORMAT = "%Y-%m-%d"

SCRIPT_PREFIX = "window.gameData = "
SCRIPT_SELECTOR = 'script[type="text/javascript"]'

CROSSWORD_BYPASS_HEADERS = {"x-games-auth-bypass": "true"}

SUDOKU_GRID_SIZE = 9


class Direction(str, Enum):
    """Clue directions as published in the crossword feed."""

    ACROSS = "Across"
    DOWN = "Down"


class Difficulty(str, Enum):
    """Sudoku difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class FetchStrategy(str, Enum):
    """How a game's raw payload is obtained."""

    JSON = "json"
    SCRIPT_EMBEDDED = "script_embedded"
