"""Rendering a :class:`ScrapeResult` for the console and for disk.

The console and the saved file share :func:`render_report`, so a saved file
is byte-for-byte what was printed.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Union

import typer

from pagescraper.scraper.errors import PersistenceError
from pagescraper.scraper.models import ScrapeResult

logger = logging.getLogger(__name__)

LINKS_HEADER = "Scraped Links:"
TEXTS_HEADER = "Scraped Text (Paragraphs):"
IMAGES_HEADER = "Scraped Images:"


def _section(header: str, values: Iterable[str]) -> List[str]:
    lines = [header]
    lines.extend(f"{i}. {value}" for i, value in enumerate(values, start=1))
    return lines


def render_report(result: ScrapeResult) -> str:
    """Return the numbered Links / Texts / Images report, newline-terminated."""
    lines = _section(LINKS_HEADER, result.links)
    lines.append("")
    lines.extend(_section(TEXTS_HEADER, result.texts))
    lines.append("")
    lines.extend(_section(IMAGES_HEADER, result.images))
    return "\n".join(lines) + "\n"


def render_json(result: ScrapeResult) -> str:
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)


def echo_report(result: ScrapeResult) -> None:
    typer.echo(render_report(result), nl=False)


def save_report(result: ScrapeResult, path: Union[str, Path]) -> Path:
    """Write the report to *path* (UTF-8) and return the path written.

    Raises:
        PersistenceError: If the file cannot be created or written.
    """
    path = Path(path)
    try:
        path.write_text(render_report(result), encoding="utf-8")
    except OSError as exc:
        raise PersistenceError(f"error creating file: {exc}") from exc
    logger.info("Saved report to %s", path)
    return path
