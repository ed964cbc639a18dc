"""Persist the finished report as a dated markdown file."""

from __future__ import annotations

from datetime import date
from pathlib import Path

from ..config import DEFAULT_REPORT_DIR
from ..utils.dates import format_date
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


class ReportWriter:
    """Write reports to ``<output_dir>/nytgames.<yyyy-MM-dd>.md``."""

    def __init__(self, output_dir: Path | str = DEFAULT_REPORT_DIR) -> None:
        self.output_dir = Path(output_dir)

    def path_for(self, when: date) -> Path:
        return self.output_dir / f"nytgames.{format_date(when)}.md"

    def write(self, text: str, when: date) -> Path:
        """Write ``text``, replacing any report already stored for ``when``."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self.path_for(when)
        path.write_text(text, encoding="utf-8")
        LOGGER.info("Report written: %s", path)
        return path
