"""The Mini and The Crossword.

Both endpoints wrap the puzzle body in a one-element ``body`` list holding
the grid dimensions, a flat row-major cell list and the clues.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from ..core.constants import CROSSWORD_BYPASS_HEADERS, Direction, FetchStrategy
from ..core.exceptions import ShapeError
from ..core.models import Clue, CrosswordGame, PublicationInformation
from ..decoding.grid import chunk_rows
from ..decoding.json_node import JsonNode
from ..report.formatting import constructor_lines, render_grid, section_header
from .base import GameDefinition, invalid_value, optional_str, static_url


def decode_direction(node: JsonNode) -> Direction:
    value = node.as_str()
    try:
        return Direction(value)
    except ValueError:
        raise invalid_value(node, value, "clue direction") from None


def decode_clue(node: JsonNode) -> Clue:
    return Clue(
        direction=decode_direction(node.field("direction")),
        label=node.field("label").as_int(),
        hint=node.field("text").exactly_one().field("plain").as_str(),
    )


def cell_decoder(single_char: bool) -> Callable[[JsonNode], Optional[str]]:
    """Decode a cell to its answer, or ``None`` for a blocked square.

    The Mini never uses rebus squares, so its answers must be one letter.
    """

    def decode(node: JsonNode) -> Optional[str]:
        answer = node.optional("answer")
        if answer is None:
            return None
        return answer.as_char() if single_char else answer.as_str()

    return decode


def _positive(node: JsonNode) -> int:
    value = node.as_int()
    if value <= 0:
        raise ShapeError(node.path, f"Expecting a positive dimension but instead got: {value}")
    return value


def crossword_decoder(single_char: bool) -> Callable[[JsonNode], CrosswordGame]:
    decode_cell = cell_decoder(single_char)

    def decode(node: JsonNode) -> CrosswordGame:
        body = node.field("body").exactly_one()
        height = _positive(body.at("dimensions", "height"))
        width = _positive(body.at("dimensions", "width"))
        cells_node = body.field("cells")
        cells = cells_node.list_of(decode_cell)
        if len(cells) != height * width:
            raise ShapeError(
                cells_node.path,
                f"Expecting {height * width} cells for a {height}x{width} grid but instead got {len(cells)}",
            )
        return CrosswordGame(
            info=PublicationInformation(
                id=node.field("id").as_int(),
                print_date=node.field("publicationDate").as_date(),
                editor=optional_str(node, "editor"),
                constructors=node.field("constructors").str_list(),
            ),
            solution=chunk_rows(cells, width),
            clues=body.field("clues").list_of(decode_clue),
            height=height,
            width=width,
        )

    return decode


decode_mini = crossword_decoder(single_char=True)
decode_crossword = crossword_decoder(single_char=False)


def render_crossword(title: str, game: CrosswordGame) -> List[str]:
    return [
        f"{section_header(title, game.info)}\n",
        *constructor_lines(game.info),
        "\n**Solution:**\n",
        render_grid(game.solution),
    ]


MINI = GameDefinition(
    key="mini",
    title="The Mini",
    strategy=FetchStrategy.JSON,
    url=static_url("/svc/crosswords/v6/puzzle/mini.json"),
    decoder=decode_mini,
    renderer=render_crossword,
)

CROSSWORD = GameDefinition(
    key="crossword",
    title="The Crossword",
    strategy=FetchStrategy.JSON,
    url=static_url("/svc/crosswords/v6/puzzle/daily.json"),
    decoder=decode_crossword,
    renderer=render_crossword,
    headers=CROSSWORD_BYPASS_HEADERS,
)
