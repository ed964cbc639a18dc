"""Custom exception hierarchy for puzzle fetching and decoding."""

from __future__ import annotations

from typing import Optional


class NytGamesError(Exception):
    """Base exception for every failure surfaced by an accessor."""


class FetchError(NytGamesError):
    """Raised when a request fails or the server answers with a non-2xx status."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None) -> None:
        self.url = url
        self.reason = reason
        self.status_code = status_code
        status = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"Request to {url} failed{status}: {reason}")


class ShapeError(NytGamesError):
    """Raised when a payload field is missing, mistyped or holds an unknown value."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error at: `{path}`: {reason}")


class CardinalityError(ShapeError):
    """Raised when a selection must yield exactly one element but did not."""

    def __init__(self, path: str, expected: int, actual: int, what: str = "list entry") -> None:
        self.expected = expected
        self.actual = actual
        noun = "entry" if actual == 1 else "entries"
        super().__init__(
            path,
            f"Expected exactly {expected} {what}, but got {actual} {noun}",
        )
