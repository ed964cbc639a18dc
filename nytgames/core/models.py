"""Immutable records produced by the game decoders."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Optional, Tuple

from .constants import Difficulty, Direction


@dataclass(frozen=True)
class PublicationInformation:
    """Common information published with each game."""

    id: int
    print_date: date
    editor: Optional[str] = None
    constructors: Tuple[str, ...] = ()


@dataclass(frozen=True)
class WordleGame:
    info: PublicationInformation
    solution: str


@dataclass(frozen=True)
class Category:
    title: str
    cards: Tuple[str, ...]


@dataclass(frozen=True)
class ConnectionsGame:
    """A Connections board, used for both the daily and the sports edition."""

    info: PublicationInformation
    categories: Tuple[Category, ...]


@dataclass(frozen=True)
class LetterBoxedGame:
    info: PublicationInformation
    sides: Tuple[str, ...]
    solution: Tuple[str, ...]
    par: int


@dataclass(frozen=True)
class StrandsGame:
    info: PublicationInformation
    clue: str
    spangram: str
    theme_words: Tuple[str, ...]
    board: Tuple[str, ...]


@dataclass(frozen=True)
class SpellingBeeGame:
    info: PublicationInformation
    center_letter: str
    outer_letters: Tuple[str, ...]
    answers: Tuple[str, ...]


@dataclass(frozen=True)
class Clue:
    direction: Direction
    label: int
    hint: str


@dataclass(frozen=True)
class CrosswordGame:
    """Solution grid and clues of The Mini or The Crossword.

    ``solution`` is row-major with ``height`` rows of ``width`` cells; a cell
    is ``None`` for blocked squares.
    """

    info: PublicationInformation
    solution: Tuple[Tuple[Optional[str], ...], ...]
    clues: Tuple[Clue, ...]
    height: int
    width: int


@dataclass(frozen=True)
class SudokuGame:
    info: PublicationInformation
    puzzle: Tuple[Tuple[Optional[int], ...], ...]
    solution: Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True)
class SkippedEntry:
    """A keyed payload entry that failed to decode."""

    key: str
    reason: str


@dataclass(frozen=True)
class SudokuCollection:
    games: Dict[Difficulty, SudokuGame] = field(default_factory=dict)
    skipped: Tuple[SkippedEntry, ...] = ()

    def get(self, difficulty: Difficulty) -> Optional[SudokuGame]:
        return self.games.get(difficulty)
