"""Exceptions raised by the scraper pipeline.

None of these are retried.  The CLI is the only layer that turns them into
exit codes and operator-facing messages.
"""

from __future__ import annotations


class ScrapeError(Exception):
    """Base class for every failure the scraper reports."""


class FetchError(ScrapeError):
    """The page could not be fetched, or the server did not answer 200."""


class ParseError(ScrapeError):
    """The response body could not be turned into a document tree."""


class PersistenceError(ScrapeError):
    """The report could not be written to disk."""
