"""Runtime configuration for fetching and reporting."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .core.constants import HOST

DEFAULT_REPORT_DIR = Path("Reports")


@dataclass(frozen=True)
class FetchConfig:
    """HTTP settings shared by every accessor.

    ``timeout_seconds`` defaults to ``None`` so requests block for as long
    as the underlying client allows.
    """

    host: str = HOST
    timeout_seconds: Optional[float] = None
    user_agent: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FetchConfig":
        env = os.environ if environ is None else environ
        timeout = env.get("NYTGAMES_TIMEOUT")
        return cls(
            host=env.get("NYTGAMES_HOST", HOST).rstrip("/"),
            timeout_seconds=float(timeout) if timeout else None,
            user_agent=env.get("NYTGAMES_USER_AGENT") or None,
        )


@dataclass(frozen=True)
class ReportConfig:
    output_dir: Path = DEFAULT_REPORT_DIR

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ReportConfig":
        env = os.environ if environ is None else environ
        return cls(output_dir=Path(env.get("NYTGAMES_REPORT_DIR", str(DEFAULT_REPORT_DIR))))
