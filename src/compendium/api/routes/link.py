"""API routes for quick links."""

from litestar import Controller, delete, get, post
from litestar.status_codes import HTTP_200_OK, HTTP_201_CREATED

from compendium.api.schemas.link import LinkRequest, LinkResponse
from compendium.services.tracker import TrackerService


class LinkController(Controller):
    path = "/links"

    @get("/", status_code=HTTP_200_OK)
    async def list_links(self, tracker: TrackerService) -> list[LinkResponse]:
        return [LinkResponse.model_validate(link) for link in tracker.links]

    @post("/", status_code=HTTP_201_CREATED)
    async def create_link(self, tracker: TrackerService, data: LinkRequest) -> LinkResponse:
        link = await tracker.add_link(data.to_draft())
        return LinkResponse.model_validate(link)

    @delete("/{link_id:str}")
    async def delete_link(self, tracker: TrackerService, link_id: str) -> None:
        await tracker.delete_link(link_id)
