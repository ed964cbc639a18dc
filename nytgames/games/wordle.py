"""Wordle: a single five-letter solution per day."""

from __future__ import annotations

from typing import List

from ..core.constants import FetchStrategy
from ..core.models import PublicationInformation, WordleGame
from ..decoding.json_node import JsonNode
from ..report.formatting import code, section_header
from .base import GameDefinition, dated_url, optional_str


def decode_wordle(node: JsonNode) -> WordleGame:
    return WordleGame(
        info=PublicationInformation(
            id=node.field("id").as_int(),
            print_date=node.field("print_date").as_date(),
            editor=optional_str(node, "editor"),
        ),
        solution=node.field("solution").as_str().upper(),
    )


def render_wordle(title: str, game: WordleGame) -> List[str]:
    return [f"{section_header(title, game.info)}\n\n**Solution:** {code(game.solution)}"]


WORDLE = GameDefinition(
    key="wordle",
    title="Wordle",
    strategy=FetchStrategy.JSON,
    url=dated_url("wordle", 2),
    decoder=decode_wordle,
    renderer=render_wordle,
    date_addressed=True,
)
