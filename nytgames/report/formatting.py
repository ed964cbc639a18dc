"""Markdown building blocks shared by the game renderers."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from ..core.models import PublicationInformation

UNKNOWN_EDITOR = "Unknown"


def code(text: str) -> str:
    return f"`{text}`"


def section_header(title: str, info: PublicationInformation) -> str:
    """Level-2 heading followed by the editor attribution."""

    return f"\n## {title}\n\n**By:** {info.editor or UNKNOWN_EDITOR}"


def constructor_lines(info: PublicationInformation) -> List[str]:
    if not info.constructors:
        return []
    return ["**Constructed by:**\n", *(f"- {name}" for name in info.constructors)]


def render_grid(rows: Sequence[Sequence[Optional[Any]]]) -> str:
    """Fenced text block with cells space-joined; blank cells become a space."""

    body = "\n".join(
        " ".join(" " if cell is None else str(cell) for cell in row) for row in rows
    )
    return f"```text\n{body}\n```"
