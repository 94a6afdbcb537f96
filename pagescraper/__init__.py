"""pagescraper: fetch one web page and pull links, paragraphs and images out of it."""

__version__ = "0.1.0"
