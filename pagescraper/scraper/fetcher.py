"""HTTP fetcher: one GET, one page, no retries."""

from __future__ import annotations

import logging

import httpx

from pagescraper.config import settings
from pagescraper.scraper.errors import FetchError
from pagescraper.scraper.models import RawPage

logger = logging.getLogger(__name__)


def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Redirects are followed; the final response must be ``200 OK``.

    Raises:
        FetchError: On any transport failure (bad URL, DNS, connect, timeout)
            or when the final status code is not 200.
    """
    logger.info("Fetching %s", url)
    try:
        with httpx.Client(
            headers={"User-Agent": settings.user_agent},
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise FetchError(f"error fetching URL: {exc}") from exc

    if response.status_code != httpx.codes.OK:
        raise FetchError(f"error: status code {response.status_code}")

    logger.info("HTTP %d, %d bytes from %s", response.status_code, len(response.content), response.url)
    return RawPage(
        url=url,
        content=response.content,
        status_code=response.status_code,
        encoding=response.charset_encoding,
    )
