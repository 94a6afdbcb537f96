"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    content: bytes
    status_code: int
    encoding: Optional[str] = None


@dataclass(frozen=True)
class ScrapeResult:
    """Links, paragraph texts and image sources pulled from one document.

    Each sequence is in document order and keeps duplicates.
    """

    links: Tuple[str, ...] = field(default_factory=tuple)
    texts: Tuple[str, ...] = field(default_factory=tuple)
    images: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not (self.links or self.texts or self.images)

    def to_dict(self) -> Dict[str, List[str]]:
        return {
            "links": list(self.links),
            "texts": list(self.texts),
            "images": list(self.images),
        }
