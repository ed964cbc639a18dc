"""Reshaping helpers for flat, row-major cell lists."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def chunk_rows(cells: Sequence[T], width: int) -> Tuple[Tuple[T, ...], ...]:
    """Split ``cells`` into consecutive rows of ``width`` items.

    The final row is shorter when ``len(cells)`` is not a multiple of
    ``width``.
    """

    if width <= 0:
        raise ValueError(f"Row width must be positive, got {width}")
    return tuple(tuple(cells[start:start + width]) for start in range(0, len(cells), width))


def flatten_rows(rows: Iterable[Sequence[T]]) -> List[T]:
    return [cell for row in rows for cell in row]


__all__ = ["chunk_rows", "flatten_rows"]
