"""Runtime settings for the analyzer: fetch limits, URL guard and logging.

Each field reads its default from an environment variable when ``Settings``
is instantiated.  A ``.env`` file next to ``pyproject.toml`` is loaded first;
variables already set in the process environment take precedence over it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Repository root .env; never overrides the real environment.
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "10.0"))
    )
    max_redirects: int = field(
        default_factory=lambda: int(os.environ.get("MAX_REDIRECTS", "5"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "USER_AGENT",
            "Mozilla/5.0 (compatible; SEO-Analyzer-Bot/1.0)",
        )
    )

    # ------------------------------------------------------------------
    # URL guard
    # ------------------------------------------------------------------
    block_private_targets: bool = field(
        default_factory=lambda: _env_flag("BLOCK_PRIVATE_TARGETS", "true")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )
    log_file: Path | None = field(
        default_factory=lambda: (
            Path(os.environ["LOG_FILE"]) if os.environ.get("LOG_FILE") else None
        )
    )


# Shared instance; tests monkeypatch its attributes:
#   from backend.config import settings
settings = Settings()
