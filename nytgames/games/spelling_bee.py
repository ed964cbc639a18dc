"""Spelling Bee, read from the ``today`` block of the page's embedded data."""

from __future__ import annotations

from typing import List

from ..core.constants import FetchStrategy
from ..core.models import PublicationInformation, SpellingBeeGame
from ..decoding.json_node import JsonNode
from ..report.formatting import code, section_header
from .base import GameDefinition, optional_str, static_url


def decode_spelling_bee(node: JsonNode) -> SpellingBeeGame:
    today = node.field("today")
    return SpellingBeeGame(
        info=PublicationInformation(
            id=today.field("id").as_int(),
            print_date=today.field("printDate").as_date(),
            editor=optional_str(today, "editor"),
        ),
        center_letter=today.field("centerLetter").as_char(),
        outer_letters=today.field("outerLetters").list_of(JsonNode.as_char),
        answers=today.field("answers").str_list(),
    )


def render_spelling_bee(title: str, game: SpellingBeeGame) -> List[str]:
    # longest first; sorted() keeps the published order among equal lengths
    answers = sorted((f"- {code(word.upper())}" for word in game.answers), key=lambda line: -len(line))
    return [f"{section_header(title, game.info)}\n\n**Solution:**\n", "\n".join(answers)]


SPELLING_BEE = GameDefinition(
    key="spelling-bee",
    title="Spelling Bee",
    strategy=FetchStrategy.SCRIPT_EMBEDDED,
    url=static_url("/puzzles/spelling-bee"),
    decoder=decode_spelling_bee,
    renderer=render_spelling_bee,
)
