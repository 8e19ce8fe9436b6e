"""Unit tests for parsing a whole progress page."""

from unittest.mock import MagicMock

import pytest
from bs4 import BeautifulSoup

from domain.exceptions import ParsingError, SequenceGapError, UnrecognizedCellStructureError
from domain.models import Level, ProgressSelectors
from html_builders import level_anchor, problem_cell, progress_page
from infrastructure.parsers import CSSSelector, ProgressPageParser


class TestProgressPageParser:
    """Test selecting and extracting both listings."""

    @pytest.fixture
    def parser(self):
        return ProgressPageParser()

    def test_parse_sample_page(self, parser, sample_page):
        progress = parser.parse(sample_page)

        assert list(progress.levels) == [
            Level(description="Solve 25 problems", completed=True),
            Level(description="Solve 50 problems", completed=True),
            Level(description="Solve 75 problems", completed=False),
        ]
        assert list(progress.problems) == [True, True, False, True, False]
        assert progress.completed_levels == [1, 2]
        assert progress.solved_count == 3
        assert progress.solved_numbers == [1, 2, 4]

    def test_parse_is_repeatable(self, parser, sample_page):
        assert parser.parse(sample_page) == parser.parse(sample_page)

    def test_parse_soup(self, parser, sample_page):
        soup = BeautifulSoup(sample_page, "lxml")

        progress = parser.parse_soup(soup)

        assert len(progress.levels) == 3
        assert len(progress.problems) == 5

    def test_page_without_listings(self, parser):
        progress = parser.parse("<html><body><p>Log in to see your progress</p></body></html>")

        assert len(progress.levels) == 0
        assert len(progress.problems) == 0

    def test_cells_outside_section_are_ignored(self, parser):
        page = progress_page(level_anchor(1), problem_cell(1)).replace(
            "</body>",
            '<table><tr><td class="problem_solved"><a href="problem?i=9">9</a></td></tr></table></body>',
        )

        progress = parser.parse(page)

        assert list(progress.problems) == [True]

    def test_format_error_propagates_unchanged(self, parser):
        page = progress_page(level_anchor(1), problem_cell(1) + problem_cell(3))

        with pytest.raises(SequenceGapError) as exc_info:
            parser.parse(page)

        assert exc_info.value.kind == "problem"
        assert exc_info.value.position == 2

    def test_malformed_cell_in_real_layout(self, parser):
        page = progress_page(
            level_anchor(1),
            '<td class="problem_solved"><a href="problem?i=1">1</a><br></td>',
        )

        with pytest.raises(UnrecognizedCellStructureError):
            parser.parse(page)

    def test_unexpected_failure_is_wrapped(self, sample_page):
        selector = MagicMock()
        selector.select.side_effect = RuntimeError("selector engine broke")
        parser = ProgressPageParser(selector=selector)

        with pytest.raises(ParsingError) as exc_info:
            parser.parse(sample_page)

        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_custom_selectors(self, sample_page):
        selectors = ProgressSelectors(
            levels="div.info a",
            problems="td.problem_solved, td.problem_unsolved",
        )
        parser = ProgressPageParser(selector=CSSSelector(), selectors=selectors)

        progress = parser.parse(sample_page)

        assert len(progress.levels) == 3
        assert len(progress.problems) == 5
