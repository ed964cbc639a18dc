"""Connections and its sports edition.

Both publish the same board shape; they differ only in the endpoint and in
the spelling of the print date field.
"""

from __future__ import annotations

from typing import Callable, List

from ..core.constants import FetchStrategy
from ..core.models import Category, ConnectionsGame, PublicationInformation
from ..decoding.json_node import JsonNode
from ..report.formatting import code, section_header
from .base import GameDefinition, dated_path, dated_url, optional_str


def decode_category(node: JsonNode) -> Category:
    return Category(
        title=node.field("title").as_str(),
        cards=node.field("cards").list_of(lambda card: card.field("content").as_str()),
    )


def connections_decoder(date_field: str) -> Callable[[JsonNode], ConnectionsGame]:
    def decode(node: JsonNode) -> ConnectionsGame:
        return ConnectionsGame(
            info=PublicationInformation(
                id=node.field("id").as_int(),
                print_date=node.field(date_field).as_date(),
                editor=optional_str(node, "editor"),
            ),
            categories=node.field("categories").list_of(decode_category),
        )

    return decode


decode_connections = connections_decoder("print_date")
decode_sports_connections = connections_decoder("printDate")


def render_connections(title: str, game: ConnectionsGame) -> List[str]:
    lines = [f"{section_header(title, game.info)}\n\n**Categories:**\n"]
    for index, category in enumerate(game.categories, start=1):
        lines.append(f"{index}. **{category.title}**")
        lines.extend(f"    - {code(card)}" for card in category.cards)
    return lines


CONNECTIONS = GameDefinition(
    key="connections",
    title="Connections",
    strategy=FetchStrategy.JSON,
    url=dated_url("connections", 2),
    decoder=decode_connections,
    renderer=render_connections,
    date_addressed=True,
)

SPORTS_CONNECTIONS = GameDefinition(
    key="sports-connections",
    title="Connections: Sports Edition",
    strategy=FetchStrategy.JSON,
    url=dated_path("/games-assets/sports-connections/{date}.json"),
    decoder=decode_sports_connections,
    renderer=render_connections,
    date_addressed=True,
)
