"""API routes for the problem collection."""

from litestar import Controller, delete, get, post, put
from litestar.status_codes import HTTP_200_OK, HTTP_201_CREATED
from loguru import logger

from compendium.api.schemas.problem import ProblemRequest, ProblemResponse, SyncResponse
from compendium.domain.models import ALL, ViewCriteria
from compendium.services.tracker import TrackerService


class ProblemController(Controller):
    """Controller for problem endpoints."""

    path = "/problems"

    @get("/", status_code=HTTP_200_OK)
    async def list_problems(
        self,
        tracker: TrackerService,
        search: str = "",
        source: str = ALL,
        difficulty: str = ALL,
        sort: str = "addedAt:desc",
    ) -> list[ProblemResponse]:
        """
        Get the visible problem list.

        Query parameters:
        - search: case-insensitive text matched against name, source,
          difficulty and remarks
        - source / difficulty: exact filter value or "All"
        - sort: "<addedAt|name|rating|nextRevisionDate>:<asc|desc>"
        """
        criteria = ViewCriteria.build(
            search_term=search,
            filter_source=source,
            filter_difficulty=difficulty,
            sort=sort,
        )
        logger.debug(f"API request for problems: {criteria}")

        return [ProblemResponse.model_validate(p) for p in tracker.visible_problems(criteria)]

    @post("/", status_code=HTTP_201_CREATED)
    async def create_problem(self, tracker: TrackerService, data: ProblemRequest) -> ProblemResponse:
        problem = await tracker.add_problem(data.to_draft())
        return ProblemResponse.model_validate(problem)

    @put("/{problem_id:str}", status_code=HTTP_200_OK)
    async def update_problem(
        self, tracker: TrackerService, problem_id: str, data: ProblemRequest
    ) -> ProblemResponse:
        problem = await tracker.edit_problem(problem_id, data.to_draft())
        return ProblemResponse.model_validate(problem)

    @delete("/{problem_id:str}")
    async def delete_problem(self, tracker: TrackerService, problem_id: str) -> None:
        await tracker.delete_problem(problem_id)

    @post("/{problem_id:str}/revise", status_code=HTTP_200_OK)
    async def revise_problem(self, tracker: TrackerService, problem_id: str) -> ProblemResponse:
        """Mark a problem as revised and schedule its next revision."""
        problem = await tracker.mark_revised(problem_id)
        return ProblemResponse.model_validate(problem)

    @post("/sync", status_code=HTTP_200_OK)
    async def sync(self, tracker: TrackerService) -> SyncResponse:
        """Reload problems and links from the backend."""
        await tracker.load()
        return SyncResponse(problems=len(tracker.problems), links=len(tracker.links))
