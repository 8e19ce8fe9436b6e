"""API routes for progress data."""

from typing import Annotated, Optional

from litestar import Controller, get
from litestar.exceptions import HTTPException
from litestar.params import Parameter
from litestar.status_codes import (
    HTTP_200_OK,
    HTTP_401_UNAUTHORIZED,
    HTTP_502_BAD_GATEWAY,
)
from loguru import logger

from api.schemas.progress import LevelResponse, ProblemStatusResponse, ProgressResponse
from domain.exceptions import ParsingError, ProgressFetchError, SessionNotFoundError
from infrastructure.session import resolve_session_id
from services import create_progress_service


class ProgressController(Controller):
    """Controller for progress endpoints."""

    path = "/progress"

    @get("/", status_code=HTTP_200_OK)
    async def get_progress(
        self,
        session_id: Annotated[Optional[str], Parameter(header="X-Session-Id")] = None,
    ) -> ProgressResponse:
        """
        Get levels and solved problems from the progress page.

        Headers:
        - X-Session-Id: PHPSESSID cookie value (falls back to the configured one)
        """
        logger.debug("API request for progress")

        try:
            session = resolve_session_id(session_id)
        except SessionNotFoundError as e:
            raise HTTPException(status_code=HTTP_401_UNAUTHORIZED, detail=str(e)) from e

        service = create_progress_service()
        try:
            progress = await service.get_progress(session)
        except (ParsingError, ProgressFetchError) as e:
            logger.error(f"Failed to get progress: {e}")
            raise HTTPException(status_code=HTTP_502_BAD_GATEWAY, detail=str(e)) from e

        return ProgressResponse(
            levels=[
                LevelResponse(number=number, description=level.description, completed=level.completed)
                for number, level in enumerate(progress.levels, start=1)
            ],
            problems=[
                ProblemStatusResponse.model_validate(problem)
                for problem in progress.problems.problems()
            ],
            completed_levels=len(progress.completed_levels),
            solved_count=progress.solved_count,
            problem_count=len(progress.problems),
        )
