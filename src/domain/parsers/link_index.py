"""Parser for indices embedded in relative progress-page links."""

import re
from typing import Optional

from loguru import logger

from domain.exceptions import FormatError, NumericError

INDEX_PATTERN = re.compile(r"\+?[0-9]+")


def parse_link_index(href: str, kind: str, position: Optional[int] = None) -> int:
    """
    Read the trailing index of a link such as ``level?x=12``.

    ``kind`` and ``position`` only label log and error messages; the link
    prefix itself is not checked against ``kind``.
    """
    parts = href.split("=")
    if len(parts) != 2:
        raise FormatError(
            "Expected exactly one '=' in link", kind=kind, position=position, fragment=href
        )

    _, raw_index = parts
    if not INDEX_PATTERN.fullmatch(raw_index):
        raise NumericError(
            "Link index is not a non-negative integer",
            kind=kind,
            position=position,
            fragment=href,
        )

    index = int(raw_index)
    logger.debug(f"Parsed {kind} index {index} from link: {href}")
    return index
