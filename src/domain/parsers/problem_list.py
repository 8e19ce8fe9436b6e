"""Extraction of the problem listing from its table cells."""

from typing import Iterable, Optional

from bs4 import Tag
from loguru import logger

from domain.exceptions import AmbiguousOrMissingStatusError, UnrecognizedCellStructureError
from domain.models import Problems

from .level_list import expect_next_index, read_href

KIND = "problem"

STATUS_CLASSES = {
    "problem_solved": True,
    "problem_unsolved": False,
}


def _status(cell: Tag, position: int) -> bool:
    solved: Optional[bool] = None
    for css_class in cell.get("class") or []:
        if css_class not in STATUS_CLASSES:
            logger.warning(f"Unable to determine solution status from class {css_class!r}")
            continue
        value = STATUS_CLASSES[css_class]
        if solved is not None and solved != value:
            raise AmbiguousOrMissingStatusError(
                "Cell carries both status classes",
                kind=KIND,
                position=position,
                fragment=cell,
            )
        solved = value

    if solved is None:
        raise AmbiguousOrMissingStatusError(
            "Unable to find solution status", kind=KIND, position=position, fragment=cell
        )
    return solved


def _anchor(cell: Tag, position: int) -> Tag:
    children = list(cell.children)
    if len(children) == 1:
        (anchor,) = children
        if isinstance(anchor, Tag) and anchor.name == "a":
            return anchor
    raise UnrecognizedCellStructureError(
        "Unrecognized set of child nodes in problem cell",
        kind=KIND,
        position=position,
        fragment=cell,
    )


def parse_problem(cell: Tag, position: int) -> bool:
    """Return whether the cell, which must be problem ``position``, is solved."""
    solved = _status(cell, position)
    anchor = _anchor(cell, position)
    expect_next_index(read_href(anchor, KIND, position), KIND, position)
    return solved


def extract_problems(cells: Iterable[Tag]) -> Problems:
    """
    Build the solved flags from table cells in document order.

    The first malformed cell aborts the extraction; unknown extra classes on a
    cell are only logged.
    """
    solved: list[bool] = []
    for cell in cells:
        solved.append(parse_problem(cell, len(solved) + 1))

    logger.debug(f"Extracted {len(solved)} problems, {sum(solved)} solved")
    return Problems(tuple(solved))
