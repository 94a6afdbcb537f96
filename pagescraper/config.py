"""Centralised settings for pagescraper.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "SCRAPER_USER_AGENT", "Mozilla/5.0 (compatible; PageScraper/1.0)"
        )
    )

    # ------------------------------------------------------------------
    # Parser
    # ------------------------------------------------------------------
    html_parser: str = field(
        default_factory=lambda: os.environ.get("HTML_PARSER", "html5lib")
    )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    output_file: Path = field(
        default_factory=lambda: Path(os.environ.get("SCRAPER_OUTPUT_FILE", "output.txt"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "WARNING")
    )
    log_format: str = field(
        default_factory=lambda: os.environ.get("LOG_FORMAT", "text")
    )


# Module-level singleton — import this everywhere:
#   from pagescraper.config import settings
settings = Settings()
