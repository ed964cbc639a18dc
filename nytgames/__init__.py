"""Daily puzzle fetcher and markdown reporter.

This package exposes the public API surface via:

- ``nytgames.games``: per-game definitions and the ``get_game`` accessor.
- ``nytgames.report.assembler.ReportAssembler``: builds the daily report.
- ``nytgames.report.writer.ReportWriter``: writes it to a dated file.
"""

from .io.http_client import PuzzleHttpClient
from .report.assembler import ReportAssembler
from .report.writer import ReportWriter

__all__ = [
    "PuzzleHttpClient",
    "ReportAssembler",
    "ReportWriter",
]

__version__ = "0.1.0"
