"""Domain models package."""

from .progress import Level, Levels, Problem, Problems, Progress, ProgressSelectors

__all__ = [
    "Level",
    "Levels",
    "Problem",
    "Problems",
    "Progress",
    "ProgressSelectors",
]
