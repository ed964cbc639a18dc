"""Sudoku: one puzzle per difficulty, embedded in the game page.

Each difficulty entry is decoded on its own. Entries that fail are left
out of the collection and recorded in :attr:`SudokuCollection.skipped`;
the remaining difficulties are still returned.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple, TypeVar

from ..core.constants import SUDOKU_GRID_SIZE, Difficulty, FetchStrategy
from ..core.exceptions import ShapeError
from ..core.models import PublicationInformation, SkippedEntry, SudokuCollection, SudokuGame
from ..decoding.grid import chunk_rows
from ..decoding.json_node import JsonNode
from ..utils.logger import get_logger
from .base import GameDefinition, invalid_value, static_url

LOGGER = get_logger(__name__)

C = TypeVar("C")


def _digit(node: JsonNode, lowest: int) -> int:
    value = node.as_int()
    if not lowest <= value <= 9:
        raise ShapeError(node.path, f"Expecting a digit between {lowest} and 9 but instead got: {value}")
    return value


def decode_puzzle_cell(node: JsonNode) -> Optional[int]:
    """``0`` marks an empty square."""

    value = _digit(node, 0)
    return value or None


def decode_solution_cell(node: JsonNode) -> int:
    return _digit(node, 1)


def decode_board(node: JsonNode, decode_cell: Callable[[JsonNode], C]) -> Tuple[Tuple[C, ...], ...]:
    cells = node.list_of(decode_cell)
    expected = SUDOKU_GRID_SIZE * SUDOKU_GRID_SIZE
    if len(cells) != expected:
        raise ShapeError(node.path, f"Expecting {expected} cells but instead got {len(cells)}")
    return chunk_rows(cells, SUDOKU_GRID_SIZE)


def decode_sudoku_game(node: JsonNode) -> SudokuGame:
    return SudokuGame(
        info=PublicationInformation(
            id=node.field("puzzle_id").as_int(),
            print_date=node.field("published").as_date(),
        ),
        puzzle=decode_board(node.at("puzzle_data", "puzzle"), decode_puzzle_cell),
        solution=decode_board(node.at("puzzle_data", "solution"), decode_solution_cell),
    )


def parse_difficulty(node: JsonNode, key: str) -> Difficulty:
    try:
        return Difficulty(key)
    except ValueError:
        raise invalid_value(node, key, "sudoku difficulty") from None


def decode_sudoku(node: JsonNode) -> SudokuCollection:
    games: Dict[Difficulty, SudokuGame] = {}
    skipped: List[SkippedEntry] = []
    for key, entry in node.entries():
        try:
            game = decode_sudoku_game(entry)
        except ShapeError as exc:
            LOGGER.warning("Skipping sudoku entry %r: %s", key, exc)
            skipped.append(SkippedEntry(key=key, reason=str(exc)))
            continue
        games[parse_difficulty(entry, key)] = game
    return SudokuCollection(games=games, skipped=tuple(skipped))


SUDOKU = GameDefinition(
    key="sudoku",
    title="Sudoku",
    strategy=FetchStrategy.SCRIPT_EMBEDDED,
    url=static_url("/puzzles/sudoku"),
    decoder=decode_sudoku,
)
