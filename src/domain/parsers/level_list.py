"""Extraction of the level listing from its anchor elements."""

from typing import Iterable

from bs4.element import NavigableString, PageElement, PreformattedString, Tag
from loguru import logger

from domain.exceptions import (
    MissingAttributeError,
    SequenceGapError,
    UnrecognizedCompletionMarkerError,
    UnrecognizedDescriptionFormatError,
    UnrecognizedLevelStructureError,
)
from domain.models import Level, Levels

from .link_index import parse_link_index

KIND = "level"

# Tag of the first child of a level anchor -> completed
COMPLETION_MARKERS = {
    "div": False,
    "img": True,
}

DESCRIPTION_TITLE_TAG = "div"


def is_text_node(node: PageElement) -> bool:
    """True for plain text nodes (comments, CDATA and the like excluded)."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def read_href(element: Tag, kind: str, position: int) -> str:
    """Return the element's href or fail if the attribute is missing."""
    href = element.get("href")
    if href is None:
        raise MissingAttributeError(
            "Element has no href attribute", kind=kind, position=position, fragment=element
        )
    if isinstance(href, list):
        href = " ".join(href)
    return href


def expect_next_index(href: str, kind: str, expected: int) -> int:
    """Parse the link index and require it to be ``expected``."""
    index = parse_link_index(href, kind, expected)
    if index != expected:
        raise SequenceGapError(
            f"Missing expected {kind} {expected}, found {index}",
            expected=expected,
            found=index,
            kind=kind,
            position=expected,
            fragment=href,
        )
    return index


def _completion(marker: PageElement, position: int) -> bool:
    if isinstance(marker, Tag) and marker.name in COMPLETION_MARKERS:
        return COMPLETION_MARKERS[marker.name]
    raise UnrecognizedCompletionMarkerError(
        "Unrecognized completion marker", kind=KIND, position=position, fragment=marker
    )


def _description(block: PageElement, position: int) -> str:
    children = list(block.children) if isinstance(block, Tag) else []
    if len(children) == 2:
        title, text = children
        if isinstance(title, Tag) and title.name == DESCRIPTION_TITLE_TAG and is_text_node(text):
            return str(text)
    raise UnrecognizedDescriptionFormatError(
        "Unexpected description format", kind=KIND, position=position, fragment=block
    )


def parse_level(anchor: Tag, position: int) -> Level:
    """Build a single level from its anchor, which must be level ``position``."""
    href = read_href(anchor, KIND, position)
    expect_next_index(href, KIND, position)

    children = list(anchor.children)
    if len(children) != 2:
        raise UnrecognizedLevelStructureError(
            f"Expected 2 nodes under level anchor, found {len(children)}",
            kind=KIND,
            position=position,
            fragment=anchor,
        )
    marker, block = children

    completed = _completion(marker, position)
    description = _description(block, position)
    return Level(description=description, completed=completed)


def extract_levels(anchors: Iterable[Tag]) -> Levels:
    """
    Build the level listing from anchors in document order.

    The first malformed anchor aborts the extraction.
    """
    levels: list[Level] = []
    for anchor in anchors:
        level = parse_level(anchor, len(levels) + 1)
        logger.debug(f"Parsed level {len(levels) + 1}: {level}")
        levels.append(level)

    logger.debug(f"Extracted {len(levels)} levels")
    return Levels(tuple(levels))
