"""Strands: theme words hidden in a letter board."""

from __future__ import annotations

from typing import List

from ..core.constants import FetchStrategy
from ..core.models import PublicationInformation, StrandsGame
from ..decoding.json_node import JsonNode
from ..report.formatting import code, section_header
from .base import GameDefinition, dated_url, optional_str


def decode_strands(node: JsonNode) -> StrandsGame:
    return StrandsGame(
        info=PublicationInformation(
            id=node.field("id").as_int(),
            print_date=node.field("printDate").as_date(),
            editor=optional_str(node, "editor"),
            # published as one display string, e.g. "Jane Doe and John Roe"
            constructors=(node.field("constructors").as_str(),),
        ),
        clue=node.field("clue").as_str(),
        spangram=node.field("spangram").as_str(),
        theme_words=node.field("themeWords").str_list(),
        board=node.field("startingBoard").str_list(),
    )


def render_strands(title: str, game: StrandsGame) -> List[str]:
    return [
        f"{section_header(title, game.info)}\n",
        f"**Spangram:** {code(game.spangram)}\n\n**Theme words:**\n",
        *(f"- {code(word)}" for word in game.theme_words),
    ]


STRANDS = GameDefinition(
    key="strands",
    title="Strands",
    strategy=FetchStrategy.JSON,
    url=dated_url("strands", 2),
    decoder=decode_strands,
    renderer=render_strands,
    date_addressed=True,
)
