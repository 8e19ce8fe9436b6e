"""Protocol interfaces for parsers."""

from typing import Optional, Protocol

from bs4 import BeautifulSoup
from bs4.element import Tag

from domain.exceptions import ParsingError
from domain.models import Progress


class ElementSelectorProtocol(Protocol):
    """Protocol for selecting elements from a parsed tree."""

    def select(self, root: Tag, selector: str) -> list[Tag]:
        """Return elements matching ``selector`` in document order."""
        ...


class ProgressPageParserProtocol(Protocol):
    """Protocol for parsing the progress page."""

    def parse(self, html: str) -> Progress:
        """Parse page markup into progress data."""
        ...

    def parse_soup(self, soup: BeautifulSoup) -> Progress:
        """Parse an already built tree into progress data."""
        ...


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get_text(self, url: str, cookies: Optional[dict[str, str]] = None) -> str:
        """Get text content from URL."""
        ...


class CSSSelector(ElementSelectorProtocol):
    """Selects elements with BeautifulSoup's CSS support."""

    def select(self, root: Tag, selector: str) -> list[Tag]:
        return list(root.select(selector))


__all__ = [
    "CSSSelector",
    "ElementSelectorProtocol",
    "HTTPClientProtocol",
    "ParsingError",
    "ProgressPageParserProtocol",
]
