"""Date and version formatting shared by URLs, headings and file names."""

from __future__ import annotations

from datetime import date

from ..core.constants import DATE_FORMAT


def format_date(when: date) -> str:
    """Return ``when`` as ``yyyy-MM-dd``."""

    return when.strftime(DATE_FORMAT)


def heading_date(when: date) -> str:
    """Return ``when`` spelled out, e.g. ``October 5, 2026``."""

    return f"{when:%B} {when.day}, {when.year}"


def version_segment(version: int) -> str:
    return f"v{version}"
