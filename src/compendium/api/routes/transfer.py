"""API routes for snapshot export and import."""

from litestar import Controller, Request, Response, get, post
from litestar.enums import MediaType
from litestar.status_codes import HTTP_201_CREATED
from loguru import logger

from compendium.api.schemas.problem import ImportResponse, ProblemResponse
from compendium.domain.scheduling import floor_to_day
from compendium.domain.transfer import export_filename
from compendium.services.tracker import TrackerService


class TransferController(Controller):
    """Controller for bulk export/import."""

    path = "/transfer"

    @get("/export")
    async def export(self, tracker: TrackerService) -> Response[bytes]:
        """Download every problem as a JSON file."""
        filename = export_filename(floor_to_day(tracker.clock()))
        logger.debug(f"Exporting problems as {filename}")

        return Response(
            content=tracker.export_problems().encode("utf-8"),
            media_type=MediaType.JSON,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @post("/import", status_code=HTTP_201_CREATED)
    async def import_(self, tracker: TrackerService, request: Request) -> ImportResponse:
        """Create problems from an uploaded JSON snapshot (the raw request body)."""
        body = await request.body()
        created = await tracker.import_problems(body)

        return ImportResponse(
            imported=len(created),
            problems=[ProblemResponse.model_validate(p) for p in created],
        )
