"""Protocol interfaces for the backend collaborators."""

from typing import Any, Protocol

from compendium.domain.models import (
    Problem,
    ProblemDraft,
    QuickLink,
    QuickLinkDraft,
    RecordId,
)


class HTTPClientProtocol(Protocol):
    """Protocol for the JSON HTTP client."""

    async def request_json(self, method: str, path: str, payload: Any = None) -> Any:
        """Send a request and return the decoded JSON body (None when empty)."""
        ...


class ProblemBackendProtocol(Protocol):
    """CRUD operations on the authoritative problem store."""

    async def list_problems(self) -> list[Problem]:
        ...

    async def create_problem(self, draft: ProblemDraft) -> Problem:
        ...

    async def update_problem(self, problem_id: RecordId, problem: Problem) -> Problem:
        ...

    async def delete_problem(self, problem_id: RecordId) -> None:
        ...

    async def create_problems_batch(self, records: list[dict[str, Any]]) -> list[Problem]:
        ...


class LinkBackendProtocol(Protocol):
    """CRUD operations on the authoritative quick link store."""

    async def list_links(self) -> list[QuickLink]:
        ...

    async def create_link(self, draft: QuickLinkDraft) -> QuickLink:
        ...

    async def delete_link(self, link_id: RecordId) -> None:
        ...


class KeyValueStoreProtocol(Protocol):
    """Best-effort persistence for session preferences."""

    def read(self, key: str) -> str | None:
        ...

    def write(self, key: str, value: str) -> bool:
        ...

    def remove(self, key: str) -> bool:
        ...
