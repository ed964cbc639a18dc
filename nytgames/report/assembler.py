"""In-memory assembly of the daily markdown report."""

from __future__ import annotations

import io
from datetime import datetime
from typing import Optional, Sequence

from ..games.accessor import get_current_game
from ..games.base import GameDefinition
from ..games.registry import REPORT_GAMES
from ..io.http_client import PuzzleHttpClient
from ..utils.dates import heading_date
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class ReportAssembler:
    """Fetch every report game in order and render the markdown text.

    The first failing game aborts the build by raising its error, so a
    report is either complete or not produced at all.
    """

    def __init__(
        self,
        client: PuzzleHttpClient,
        games: Sequence[GameDefinition] = REPORT_GAMES,
    ) -> None:
        self.client = client
        self.games = tuple(games)

    def build(self, now: Optional[datetime] = None) -> str:
        now = now or datetime.now()
        buffer = io.StringIO()

        def append(text: str) -> None:
            buffer.write(text)
            buffer.write("\n")

        append(f"# Word Games - {heading_date(now)}")
        for definition in self.games:
            game = get_current_game(definition, self.client, now).unwrap()
            for chunk in definition.render(game):
                append(chunk)
        LOGGER.info("Assembled report with %d games", len(self.games))
        return buffer.getvalue()
