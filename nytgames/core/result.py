"""Success-or-failure values returned by the game accessors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .exceptions import NytGamesError

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a decoded record or the error that prevented it."""

    value: Optional[T] = None
    error: Optional[NytGamesError] = None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: NytGamesError) -> "Outcome[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the stored error on failure."""

        if self.error is not None:
            raise self.error
        assert self.value is not None
        return self.value
