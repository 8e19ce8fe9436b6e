"""Parsers for extracting data from external sources."""

from .interfaces import (
    CSSSelector,
    ElementSelectorProtocol,
    HTTPClientProtocol,
    ParsingError,
    ProgressPageParserProtocol,
)
from .progress_page_parser import ProgressPageParser

__all__ = [
    "CSSSelector",
    "ElementSelectorProtocol",
    "HTTPClientProtocol",
    "ParsingError",
    "ProgressPageParser",
    "ProgressPageParserProtocol",
]
