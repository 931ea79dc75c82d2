"""API routes for the revision queue."""

from datetime import date

from litestar import Controller, get
from litestar.status_codes import HTTP_200_OK
from loguru import logger

from compendium.api.schemas.problem import ProblemResponse
from compendium.domain.exceptions import ValidationError
from compendium.services.tracker import TrackerService


class RevisionController(Controller):
    """Controller for spaced-repetition endpoints."""

    path = "/revisions"

    @get("/due", status_code=HTTP_200_OK)
    async def due(self, tracker: TrackerService, today: str | None = None) -> list[ProblemResponse]:
        """
        Get the problems due for revision, soonest first.

        Query parameters:
        - today: YYYY-MM-DD, defaults to the current UTC date
        """
        day = None
        if today is not None:
            try:
                day = date.fromisoformat(today)
            except ValueError as e:
                raise ValidationError(f"Invalid date: {today!r}") from e

        problems = tracker.due_today(day)
        logger.debug(f"{len(problems)} problem(s) due for revision")
        return [ProblemResponse.model_validate(p) for p in problems]
