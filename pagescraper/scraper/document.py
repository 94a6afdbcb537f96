"""Markup parsing: turns HTML bytes into an immutable :class:`Document` tree.

BeautifulSoup does the actual parsing, and the default ``html5lib`` builder
repairs broken markup the way browsers do (an open ``<p>`` is closed by the
next ``<p>`` or block element, and so on).  The mutable soup is copied once
into frozen :class:`Node` objects so extraction code never sees (or depends
on) the bs4 object model.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import cached_property
from typing import Callable, Iterator, List, Optional, Tuple, Union

from bs4 import BeautifulSoup, FeatureNotFound, UnicodeDammit
from bs4.builder import ParserRejectedMarkup
from bs4.element import NavigableString, PreformattedString, Tag

from pagescraper.config import settings
from pagescraper.scraper.errors import ParseError

logger = logging.getLogger(__name__)

ROOT_TAG = "[document]"


@dataclass(frozen=True)
class Node:
    """One element of the document tree.

    ``content`` holds text runs and child elements in document order.  Text
    of the whole subtree is only joined when :meth:`text_content` is called.
    """

    tag: str
    attrs: Tuple[Tuple[str, str], ...] = ()
    content: Tuple[Union[str, "Node"], ...] = field(default=(), repr=False)

    @cached_property
    def children(self) -> Tuple["Node", ...]:
        """Element children only, in order."""
        return tuple(item for item in self.content if isinstance(item, Node))

    def tag_name(self) -> str:
        return self.tag

    def attribute(self, name: str) -> Optional[str]:
        """Return the value of attribute *name*, or ``None`` when absent."""
        for key, value in self.attrs:
            if key == name:
                return value
        return None

    def has_attribute(self, name: str) -> bool:
        return any(key == name for key, _ in self.attrs)

    def text_content(self) -> str:
        """Concatenated text of this node and all of its descendants."""
        parts: List[str] = []
        stack = list(reversed(self.content))
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            else:
                stack.extend(reversed(item.content))
        return "".join(parts)

    def iter(self) -> Iterator["Node"]:
        """Yield this node and its descendants, depth-first pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass(frozen=True)
class Document:
    """A parsed page.  ``root`` is a synthetic node holding the top-level elements."""

    root: Node

    def find_all(self, predicate: Callable[[Node], bool]) -> Iterator[Node]:
        """Lazily yield every element matching *predicate* in document order.

        Each call returns a fresh generator, so a selection can be restarted
        by calling it again.
        """
        for node in self.root.iter():
            if node is not self.root and predicate(node):
                yield node

    def find_all_tags(self, name: str) -> Iterator[Node]:
        name = name.lower()
        return self.find_all(lambda node: node.tag == name)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

class _Frame:
    """Build state for one tag while its contents are being walked."""

    __slots__ = ("tag", "contents", "content")

    def __init__(self, tag: Tag) -> None:
        self.tag = tag
        self.contents = iter(tag.contents)
        self.content: List[Union[str, Node]] = []

    def finish(self) -> Node:
        attrs = tuple(
            (name, value if isinstance(value, str) else " ".join(value))
            for name, value in self.tag.attrs.items()
        )
        return Node(tag=self.tag.name, attrs=attrs, content=tuple(self.content))


def _is_text(item: object) -> bool:
    # Comments, doctype, CDATA and processing instructions are not page text.
    return isinstance(item, NavigableString) and not isinstance(item, PreformattedString)


def _freeze(soup: Tag) -> Node:
    """Copy a bs4 tree into frozen nodes without recursion (pages nest deeply)."""
    frames = [_Frame(soup)]
    while True:
        frame = frames[-1]
        item = next(frame.contents, None)
        if item is None:
            node = frame.finish()
            frames.pop()
            if not frames:
                return node
            frames[-1].content.append(node)
        elif isinstance(item, Tag):
            frames.append(_Frame(item))
        elif _is_text(item):
            frame.content.append(str(item))


def _decode(markup: bytes, encoding: Optional[str]) -> str:
    """Decode *markup*: the transport charset wins, then <meta>, then sniffing.

    Done here rather than in the tree builder so every builder sees the
    same text (html5lib alone falls back to windows-1252 for undeclared UTF-8).
    """
    dammit = UnicodeDammit(
        markup,
        known_definite_encodings=[encoding] if encoding else [],
        is_html=True,
    )
    if dammit.unicode_markup is None:
        raise ParseError("error parsing HTML: could not determine the character encoding")
    logger.debug("Decoded %d bytes as %s", len(markup), dammit.original_encoding)
    return dammit.unicode_markup


def _make_soup(markup: str, parser: str) -> BeautifulSoup:
    kwargs = {"multi_valued_attributes": None}
    if parser == "html.parser":
        # First occurrence of a repeated attribute wins, as in browsers.
        kwargs["on_duplicate_attribute"] = "ignore"
    return BeautifulSoup(markup, parser, **kwargs)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_html(
    markup: Union[bytes, str],
    encoding: Optional[str] = None,
    parser: Optional[str] = None,
) -> Document:
    """Parse *markup* into a :class:`Document`.

    Args:
        markup: Raw HTML, as bytes (decoded with *encoding* or sniffed) or text.
        encoding: Charset hint for byte input, typically from the HTTP
            ``Content-Type`` header.
        parser: BeautifulSoup tree builder; defaults to ``settings.html_parser``.

    Raises:
        ParseError: If the input is not markup at all, cannot be decoded,
            the tree builder rejects it, or the configured builder is not
            installed.
    """
    if not isinstance(markup, (bytes, str)):
        raise ParseError(f"error parsing HTML: expected bytes or str, got {type(markup).__name__}")

    text = _decode(markup, encoding) if isinstance(markup, bytes) else markup
    parser = parser or settings.html_parser
    try:
        soup = _make_soup(text, parser)
    except FeatureNotFound as exc:
        raise ParseError(f"error parsing HTML: parser {parser!r} is not available") from exc
    except ParserRejectedMarkup as exc:
        raise ParseError(f"error parsing HTML: {exc}") from exc

    logger.debug("Parsed %d characters with %s", len(text), parser)
    return Document(root=_freeze(soup))
