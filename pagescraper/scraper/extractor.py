"""Content extraction: turns a :class:`Document` into a :class:`ScrapeResult`.

The three rules are independent pure functions over a read-only tree, so
they can run in any order (or in parallel) and always give the same answer.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Union

from pagescraper.scraper.document import Document, parse_html
from pagescraper.scraper.models import ScrapeResult

logger = logging.getLogger(__name__)

# Anything starting with these four characters counts as an absolute link,
# which also lets through oddities like "httpfoo://".
_LINK_PREFIX = "http"


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

def extract_links(doc: Document) -> List[str]:
    """Return raw ``href`` values of ``<a>`` tags that start with ``http``.

    Relative, ``mailto:``, ``javascript:`` and fragment-only links are
    skipped, as are anchors without an ``href``.
    """
    links: List[str] = []
    for node in doc.find_all_tags("a"):
        href = node.attribute("href")
        if href is not None and href.startswith(_LINK_PREFIX):
            links.append(href)
    return links


def extract_texts(doc: Document) -> List[str]:
    """Return the trimmed text of every ``<p>`` that has any."""
    texts: List[str] = []
    for node in doc.find_all_tags("p"):
        text = node.text_content().strip()
        if text:
            texts.append(text)
    return texts


def extract_images(doc: Document) -> List[str]:
    """Return the raw ``src`` of every ``<img>`` carrying one, empty values included."""
    return [
        src
        for src in (node.attribute("src") for node in doc.find_all_tags("img"))
        if src is not None
    ]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract(doc: Document) -> ScrapeResult:
    """Apply all three rules to *doc*."""
    result = ScrapeResult(
        links=tuple(extract_links(doc)),
        texts=tuple(extract_texts(doc)),
        images=tuple(extract_images(doc)),
    )
    logger.debug(
        "Extracted %d links, %d texts, %d images",
        len(result.links),
        len(result.texts),
        len(result.images),
    )
    return result


def scrape_markup(markup: Union[bytes, str], encoding: Optional[str] = None) -> ScrapeResult:
    """Parse *markup* and extract from it in one step.

    Raises:
        ParseError: If *markup* cannot be parsed.
    """
    return extract(parse_html(markup, encoding=encoding))
