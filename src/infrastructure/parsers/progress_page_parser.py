"""Parser for extracting levels and problems from the progress page."""

from typing import Optional

from bs4 import BeautifulSoup
from loguru import logger

from domain.exceptions import ParsingError, ProgressFormatError
from domain.models import Progress, ProgressSelectors
from domain.parsers import extract_levels, extract_problems

from .interfaces import CSSSelector, ElementSelectorProtocol, ProgressPageParserProtocol


class ProgressPageParser(ProgressPageParserProtocol):
    """Parser for the Project Euler progress page."""

    def __init__(
        self,
        selector: Optional[ElementSelectorProtocol] = None,
        selectors: Optional[ProgressSelectors] = None,
    ):
        """
        Initialize parser.

        Args:
            selector: Engine used to select the listing elements
            selectors: CSS selectors for the two listings
        """
        self.selector = selector or CSSSelector()
        self.selectors = selectors or ProgressSelectors()

    def parse(self, html: str) -> Progress:
        """
        Parse progress page markup.

        Raises a ProgressFormatError subclass when the page does not match the
        expected layout.
        """
        try:
            soup = BeautifulSoup(html, "lxml")
        except Exception as e:
            logger.error(f"Failed to build document tree: {e}")
            raise ParsingError(f"Failed to parse progress page: {e}") from e

        return self.parse_soup(soup)

    def parse_soup(self, soup: BeautifulSoup) -> Progress:
        """Extract both listings from a parsed progress page."""
        try:
            anchors = self.selector.select(soup, self.selectors.levels)
            cells = self.selector.select(soup, self.selectors.problems)
            logger.debug(f"Selected {len(anchors)} level anchors and {len(cells)} problem cells")

            progress = Progress(
                levels=extract_levels(anchors),
                problems=extract_problems(cells),
            )

        except ProgressFormatError as e:
            logger.error(f"Progress page format changed: {e}")
            raise
        except Exception as e:
            logger.error(f"Failed to parse progress page: {e}")
            raise ParsingError(f"Failed to parse progress page: {e}") from e

        logger.info(
            f"Parsed progress: {len(progress.completed_levels)}/{len(progress.levels)} levels, "
            f"{progress.solved_count}/{len(progress.problems)} problems solved"
        )
        return progress
