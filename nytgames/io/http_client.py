"""Minimal HTTP client for the publisher's puzzle endpoints."""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from ..config import FetchConfig
from ..core.exceptions import FetchError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


def strip_non_ascii(text: str) -> str:
    """Drop every character outside the ASCII range."""

    return "".join(char for char in text if char.isascii())


class PuzzleHttpClient:
    """Blocking GET requests over a single :class:`requests.Session`."""

    def __init__(
        self,
        config: Optional[FetchConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or FetchConfig()
        self._session = session or requests.Session()
        if self.config.user_agent:
            self._session.headers["User-Agent"] = self.config.user_agent

    def get_text(
        self,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        *,
        ascii_only: bool = True,
    ) -> str:
        """Return the response body of ``url``.

        JSON endpoints are read with ``ascii_only`` so stray encoding
        artifacts never reach the JSON parser.
        """

        LOGGER.debug("GET %s", url)
        try:
            response = self._session.get(
                url,
                headers=dict(headers or {}),
                timeout=self.config.timeout_seconds,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise FetchError(url, str(exc), status_code=status) from exc
        except requests.RequestException as exc:
            raise FetchError(url, str(exc)) from exc

        text = response.text
        return strip_non_ascii(text) if ascii_only else text

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "PuzzleHttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
