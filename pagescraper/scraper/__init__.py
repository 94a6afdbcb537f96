"""Scraper package: fetch one page and extract links, paragraphs and images."""

from __future__ import annotations

import logging

from pagescraper.scraper.document import Document, Node, parse_html
from pagescraper.scraper.errors import FetchError, ParseError, PersistenceError, ScrapeError
from pagescraper.scraper.extractor import (
    extract,
    extract_images,
    extract_links,
    extract_texts,
    scrape_markup,
)
from pagescraper.scraper.fetcher import fetch_url
from pagescraper.scraper.models import RawPage, ScrapeResult
from pagescraper.scraper.output import echo_report, render_json, render_report, save_report

logger = logging.getLogger(__name__)


def scrape_page(url: str) -> ScrapeResult:
    """Fetch *url* and extract from it.

    Raises:
        FetchError: If the page cannot be fetched.
        ParseError: If the body cannot be parsed.
    """
    raw = fetch_url(url)
    result = scrape_markup(raw.content, encoding=raw.encoding)
    logger.info(
        "Scraped %s: %d links, %d texts, %d images",
        url,
        len(result.links),
        len(result.texts),
        len(result.images),
    )
    return result


__all__ = [
    "Document",
    "Node",
    "parse_html",
    "extract",
    "extract_links",
    "extract_texts",
    "extract_images",
    "scrape_markup",
    "scrape_page",
    "fetch_url",
    "RawPage",
    "ScrapeResult",
    "render_report",
    "render_json",
    "echo_report",
    "save_report",
    "ScrapeError",
    "FetchError",
    "ParseError",
    "PersistenceError",
]
