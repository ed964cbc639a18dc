"""Generic per-game configuration shared by every accessor."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Generic, List, Mapping, Optional, TypeVar

from ..core.constants import HOST, FetchStrategy
from ..core.exceptions import ShapeError
from ..decoding.json_node import JsonNode
from ..utils.dates import format_date, version_segment

G = TypeVar("G")

UrlBuilder = Callable[[str, date], str]


def url_for_date(slug: str, version: int, when: date, host: str = HOST) -> str:
    """Return the canonical ``/svc/<slug>/v<version>/<date>.json`` URL."""

    return f"{host}/svc/{slug}/{version_segment(version)}/{format_date(when)}.json"


def dated_url(slug: str, version: int) -> UrlBuilder:
    return lambda host, when: url_for_date(slug, version, when, host)


def dated_path(template: str) -> UrlBuilder:
    """Build URLs from a path template holding a ``{date}`` placeholder."""

    return lambda host, when: host + template.format(date=format_date(when))


def static_url(path: str) -> UrlBuilder:
    return lambda host, when: host + path


def optional_str(node: JsonNode, *names: str) -> Optional[str]:
    found = node.optional_at(*names)
    return found.as_str() if found is not None else None


def invalid_value(node: JsonNode, value: str, what: str) -> ShapeError:
    return ShapeError(node.path, f"`{value}` is an invalid {what}")


@dataclass(frozen=True)
class GameDefinition(Generic[G]):
    """Everything needed to fetch, decode and render one game.

    ``renderer`` receives the section title and the decoded record and
    returns the markdown chunks to append, one line break after each.
    """

    key: str
    title: str
    strategy: FetchStrategy
    url: UrlBuilder
    decoder: Callable[[JsonNode], G]
    renderer: Optional[Callable[[str, G], List[str]]] = None
    headers: Mapping[str, str] = field(default_factory=dict)
    date_addressed: bool = False

    def url_for(self, when: date, host: str = HOST) -> str:
        return self.url(host, when)

    def render(self, game: G) -> List[str]:
        if self.renderer is None:
            raise ValueError(f"{self.title} has no markdown renderer")
        return self.renderer(self.title, game)
