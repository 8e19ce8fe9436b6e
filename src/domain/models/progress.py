"""Value objects for the progress page."""

from dataclasses import dataclass, field
from typing import Iterator, Sequence

LEVELS_SELECTOR = "#levels_completed_section div.info a"
PROBLEMS_SELECTOR = (
    "#problems_solved_section td.problem_solved, #problems_solved_section td.problem_unsolved"
)


@dataclass(frozen=True)
class Level:
    """An achievement level shown on the progress page."""

    description: str
    completed: bool


@dataclass(frozen=True)
class Problem:
    """Solution status of a single problem."""

    number: int
    solved: bool


@dataclass(frozen=True)
class Levels:
    """Levels in page order; index ``i`` holds level ``i + 1``."""

    items: tuple[Level, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Level]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Level:
        return self.items[index]

    @property
    def completed_numbers(self) -> list[int]:
        """Numbers of the completed levels."""
        return [number for number, level in enumerate(self.items, start=1) if level.completed]


@dataclass(frozen=True)
class Problems:
    """Solved flags in page order; index ``i`` holds problem ``i + 1``."""

    solved: tuple[bool, ...] = ()

    def __len__(self) -> int:
        return len(self.solved)

    def __iter__(self) -> Iterator[bool]:
        return iter(self.solved)

    def __getitem__(self, index: int) -> bool:
        return self.solved[index]

    def problems(self) -> list[Problem]:
        return [Problem(number=i, solved=s) for i, s in enumerate(self.solved, start=1)]

    @property
    def solved_count(self) -> int:
        return sum(self.solved)

    @property
    def solved_numbers(self) -> list[int]:
        return [number for number, solved in enumerate(self.solved, start=1) if solved]


@dataclass(frozen=True)
class ProgressSelectors:
    """CSS selectors locating the two listings on the page."""

    levels: str = LEVELS_SELECTOR
    problems: str = PROBLEMS_SELECTOR


@dataclass(frozen=True)
class Progress:
    """Everything scraped from one progress page."""

    levels: Levels = field(default_factory=Levels)
    problems: Problems = field(default_factory=Problems)

    @property
    def completed_levels(self) -> list[int]:
        return self.levels.completed_numbers

    @property
    def solved_count(self) -> int:
        return self.problems.solved_count

    @property
    def solved_numbers(self) -> list[int]:
        return self.problems.solved_numbers

    @classmethod
    def from_sequences(cls, levels: Sequence[Level], problems: Sequence[bool]) -> "Progress":
        return cls(levels=Levels(tuple(levels)), problems=Problems(tuple(problems)))
