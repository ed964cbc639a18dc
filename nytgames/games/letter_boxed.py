"""Letter Boxed, read from the game page's embedded data."""

from __future__ import annotations

from typing import List

from ..core.constants import FetchStrategy
from ..core.models import LetterBoxedGame, PublicationInformation
from ..decoding.json_node import JsonNode
from ..report.formatting import code, section_header
from .base import GameDefinition, optional_str, static_url


def decode_letter_boxed(node: JsonNode) -> LetterBoxedGame:
    return LetterBoxedGame(
        info=PublicationInformation(
            id=node.field("id").as_int(),
            print_date=node.field("printDate").as_date(),
            editor=optional_str(node, "editor"),
        ),
        sides=node.field("sides").str_list(),
        solution=node.field("ourSolution").str_list(),
        par=node.field("par").as_int(),
    )


def render_letter_boxed(title: str, game: LetterBoxedGame) -> List[str]:
    solution = " - ".join(code(word) for word in game.solution)
    return [f"{section_header(title, game.info)}\n\n**Solution:** {solution}"]


LETTER_BOXED = GameDefinition(
    key="letter-boxed",
    title="Letter Boxed",
    strategy=FetchStrategy.SCRIPT_EMBEDDED,
    url=static_url("/puzzles/letter-boxed"),
    decoder=decode_letter_boxed,
    renderer=render_letter_boxed,
)
