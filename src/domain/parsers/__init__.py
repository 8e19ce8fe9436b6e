"""Parsers for the progress page listings."""

from .level_list import extract_levels
from .link_index import parse_link_index
from .problem_list import extract_problems

__all__ = ["extract_levels", "extract_problems", "parse_link_index"]
