"""Client for the problem and quick link CRUD API."""

from typing import Any

from loguru import logger

from compendium.domain.exceptions import TransportError, ValidationError
from compendium.domain.models import (
    Problem,
    ProblemDraft,
    QuickLink,
    QuickLinkDraft,
    RecordId,
)

from .interfaces import (
    HTTPClientProtocol,
    LinkBackendProtocol,
    ProblemBackendProtocol,
)

PROBLEMS_PATH = "/problems"
LINKS_PATH = "/links"


def _decode_problem(data: Any) -> Problem:
    try:
        return Problem.from_dict(data)
    except ValidationError as e:
        raise TransportError(f"Backend returned a malformed problem: {e}") from e


def _decode_link(data: Any) -> QuickLink:
    try:
        return QuickLink.from_dict(data)
    except ValidationError as e:
        raise TransportError(f"Backend returned a malformed link: {e}") from e


def _expect_list(data: Any, what: str) -> list[Any]:
    if not isinstance(data, list):
        raise TransportError(f"Expected a list of {what}, got {type(data).__name__}")
    return data


class CompendiumApiClient(ProblemBackendProtocol, LinkBackendProtocol):
    """CRUD collaborator backed by the tracker REST API."""

    def __init__(self, http_client: HTTPClientProtocol):
        self.http_client = http_client

    async def list_problems(self) -> list[Problem]:
        data = await self.http_client.request_json("GET", PROBLEMS_PATH)
        problems = [_decode_problem(item) for item in _expect_list(data, "problems")]
        logger.debug(f"Fetched {len(problems)} problem(s)")
        return problems

    async def create_problem(self, draft: ProblemDraft) -> Problem:
        data = await self.http_client.request_json("POST", PROBLEMS_PATH, draft.to_dict())
        return _decode_problem(data)

    async def update_problem(self, problem_id: RecordId, problem: Problem) -> Problem:
        data = await self.http_client.request_json(
            "PUT", f"{PROBLEMS_PATH}/{problem_id}", problem.to_dict()
        )
        return _decode_problem(data)

    async def delete_problem(self, problem_id: RecordId) -> None:
        await self.http_client.request_json("DELETE", f"{PROBLEMS_PATH}/{problem_id}")

    async def create_problems_batch(self, records: list[dict[str, Any]]) -> list[Problem]:
        data = await self.http_client.request_json("POST", f"{PROBLEMS_PATH}/batch", records)
        problems = [_decode_problem(item) for item in _expect_list(data, "problems")]
        logger.debug(f"Backend created {len(problems)} problem(s) from batch of {len(records)}")
        return problems

    async def list_links(self) -> list[QuickLink]:
        data = await self.http_client.request_json("GET", LINKS_PATH)
        return [_decode_link(item) for item in _expect_list(data, "links")]

    async def create_link(self, draft: QuickLinkDraft) -> QuickLink:
        data = await self.http_client.request_json("POST", LINKS_PATH, draft.to_dict())
        return _decode_link(data)

    async def delete_link(self, link_id: RecordId) -> None:
        await self.http_client.request_json("DELETE", f"{LINKS_PATH}/{link_id}")
