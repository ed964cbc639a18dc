"""Extraction of JSON payloads embedded in page ``<script>`` tags."""

from __future__ import annotations

from bs4 import BeautifulSoup, NavigableString

from ..core.constants import SCRIPT_PREFIX, SCRIPT_SELECTOR
from ..core.exceptions import CardinalityError


def _direct_text(tag) -> str:
    return "".join(str(child) for child in tag.children if isinstance(child, NavigableString))


def extract_script_payload(html: str, prefix: str = SCRIPT_PREFIX) -> str:
    """Return the text following ``prefix`` in the single matching script.

    Exactly one ``text/javascript`` script must start with ``prefix``;
    otherwise a :class:`CardinalityError` reports how many did.
    """

    soup = BeautifulSoup(html, "html.parser")
    matches = [
        text
        for text in (_direct_text(tag) for tag in soup.select(SCRIPT_SELECTOR))
        if text.startswith(prefix)
    ]
    if len(matches) != 1:
        raise CardinalityError(
            SCRIPT_SELECTOR,
            expected=1,
            actual=len(matches),
            what=f"script starting with `{prefix.strip()}`",
        )
    payload = matches[0][len(prefix):].rstrip()
    if payload.endswith(";"):
        payload = payload[:-1]
    return payload
