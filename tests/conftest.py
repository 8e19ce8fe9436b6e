"""Shared fixtures for progress page tests."""

import pytest

from html_builders import level_anchor, problem_cell, progress_page


@pytest.fixture
def sample_page() -> str:
    """Page with three levels (first two completed) and five problems."""
    levels = "".join(
        [
            level_anchor(1, completed=True, description="Solve 25 problems"),
            level_anchor(2, completed=True, description="Solve 50 problems"),
            level_anchor(3, completed=False, description="Solve 75 problems"),
        ]
    )
    problems = "".join(
        [
            problem_cell(1, solved=True),
            problem_cell(2, solved=True),
            problem_cell(3, solved=False),
            problem_cell(4, solved=True, extra_class="tooltip"),
            problem_cell(5, solved=False),
        ]
    )
    return progress_page(levels, problems)
