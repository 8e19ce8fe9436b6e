"""Pydantic schemas for progress API endpoints."""

from pydantic import BaseModel


class LevelResponse(BaseModel):
    """A single achievement level."""

    number: int
    description: str
    completed: bool


class ProblemStatusResponse(BaseModel):
    """Solution status of one problem."""

    number: int
    solved: bool

    class Config:
        from_attributes = True


class ProgressResponse(BaseModel):
    """Response containing the scraped progress page."""

    levels: list[LevelResponse]
    problems: list[ProblemStatusResponse]
    completed_levels: int
    solved_count: int
    problem_count: int
