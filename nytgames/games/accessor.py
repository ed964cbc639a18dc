"""Fetch, decode and wrap one game's payload in an :class:`Outcome`."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, TypeVar

from ..core.constants import FetchStrategy
from ..core.exceptions import NytGamesError
from ..core.result import Outcome
from ..decoding.json_node import JsonNode
from ..io.http_client import PuzzleHttpClient
from ..io.scripts import extract_script_payload
from ..utils.logger import get_logger
from .base import GameDefinition

LOGGER = get_logger(__name__)

G = TypeVar("G")


def fetch_payload(definition: GameDefinition[G], client: PuzzleHttpClient, when: date) -> str:
    """Return the raw JSON text for ``definition`` on ``when``."""

    url = definition.url_for(when, client.config.host)
    if definition.strategy is FetchStrategy.SCRIPT_EMBEDDED:
        html = client.get_text(url, definition.headers, ascii_only=False)
        return extract_script_payload(html)
    return client.get_text(url, definition.headers)


def decode_payload(definition: GameDefinition[G], text: str) -> G:
    return definition.decoder(JsonNode.parse(text))


def get_game(definition: GameDefinition[G], client: PuzzleHttpClient, when: date) -> Outcome[G]:
    try:
        game = decode_payload(definition, fetch_payload(definition, client, when))
    except NytGamesError as exc:
        LOGGER.debug("%s failed: %s", definition.title, exc)
        return Outcome.failure(exc)
    LOGGER.info("Decoded %s", definition.title)
    return Outcome.success(game)


def get_current_game(
    definition: GameDefinition[G],
    client: PuzzleHttpClient,
    now: Optional[datetime] = None,
) -> Outcome[G]:
    return get_game(definition, client, (now or datetime.now()).date())
