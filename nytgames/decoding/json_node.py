"""Path-tracking reader over parsed JSON.

Every accessor remembers where it sits in the document (``$.body[0].cells``)
so that a missing field or a mistyped value produces a :class:`ShapeError`
naming the exact location.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from typing import Any, Callable, List, Optional, Tuple, TypeVar

from ..core.exceptions import CardinalityError, ShapeError

T = TypeVar("T")


def _describe(value: Any) -> str:
    text = json.dumps(value, ensure_ascii=True)
    if len(text) > 60:
        text = text[:57] + "..."
    return text


class JsonNode:
    """A JSON value together with its path from the document root."""

    __slots__ = ("value", "path")

    def __init__(self, value: Any, path: str = "$") -> None:
        self.value = value
        self.path = path

    @classmethod
    def parse(cls, text: str) -> "JsonNode":
        try:
            return cls(json.loads(text))
        except json.JSONDecodeError as exc:
            raise ShapeError("$", f"Given an invalid JSON: {exc}") from exc

    def __repr__(self) -> str:
        return f"JsonNode({self.path}={_describe(self.value)})"

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _expect_object(self) -> dict:
        if not isinstance(self.value, dict):
            raise ShapeError(self.path, f"Expecting an object but instead got: {_describe(self.value)}")
        return self.value

    def field(self, name: str) -> "JsonNode":
        """Return the required field ``name``."""

        obj = self._expect_object()
        if name not in obj:
            raise ShapeError(self.path, f"Expecting an object with a field named `{name}`")
        return JsonNode(obj[name], f"{self.path}.{name}")

    def optional(self, name: str) -> Optional["JsonNode"]:
        """Return field ``name``, or ``None`` when it is absent or null."""

        obj = self._expect_object()
        if obj.get(name) is None:
            return None
        return JsonNode(obj[name], f"{self.path}.{name}")

    def at(self, *names: str) -> "JsonNode":
        node = self
        for name in names:
            node = node.field(name)
        return node

    def optional_at(self, *names: str) -> Optional["JsonNode"]:
        node: Optional[JsonNode] = self
        for name in names:
            if node is None:
                return None
            node = node.optional(name)
        return node

    def items(self) -> List["JsonNode"]:
        if not isinstance(self.value, list):
            raise ShapeError(self.path, f"Expecting a list but instead got: {_describe(self.value)}")
        return [JsonNode(item, f"{self.path}[{index}]") for index, item in enumerate(self.value)]

    def entries(self) -> List[Tuple[str, "JsonNode"]]:
        obj = self._expect_object()
        return [(key, JsonNode(value, f"{self.path}.{key}")) for key, value in obj.items()]

    def exactly_one(self) -> "JsonNode":
        """Unwrap a list that must hold a single entry."""

        items = self.items()
        if len(items) != 1:
            raise CardinalityError(self.path, expected=1, actual=len(items))
        return items[0]

    def list_of(self, decoder: Callable[["JsonNode"], T]) -> Tuple[T, ...]:
        return tuple(decoder(item) for item in self.items())

    # ------------------------------------------------------------------
    # Scalars
    # ------------------------------------------------------------------

    def as_str(self) -> str:
        if not isinstance(self.value, str):
            raise ShapeError(self.path, f"Expecting a string but instead got: {_describe(self.value)}")
        return self.value

    def as_int(self) -> int:
        value = self.value
        if isinstance(value, bool):
            raise ShapeError(self.path, f"Expecting an int but instead got: {_describe(value)}")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                pass
        raise ShapeError(self.path, f"Expecting an int but instead got: {_describe(value)}")

    def as_char(self) -> str:
        text = self.as_str()
        if len(text) != 1:
            raise ShapeError(self.path, f"Expecting a single character but instead got: {_describe(text)}")
        return text

    def as_date(self) -> date:
        """Parse an ISO date or datetime, keeping the calendar date as written."""

        text = self.as_str().strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text).date()
        except ValueError as exc:
            raise ShapeError(self.path, f"Expecting a datetime but instead got: {_describe(self.value)}") from exc

    def str_list(self) -> Tuple[str, ...]:
        return self.list_of(JsonNode.as_str)


__all__ = ["JsonNode"]
