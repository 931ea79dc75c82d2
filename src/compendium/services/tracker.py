"""Service coordinating the problem tracker session."""

import asyncio
from collections.abc import Callable
from dataclasses import replace
from datetime import date, datetime, timezone
from typing import Any

from loguru import logger

from compendium.domain import scheduling
from compendium.domain.exceptions import NotFoundError
from compendium.domain.models import (
    Problem,
    ProblemDraft,
    QuickLink,
    QuickLinkDraft,
    RecordId,
    ViewCriteria,
)
from compendium.domain.transfer import export_snapshot, import_snapshot
from compendium.domain.view import compute_due_today, compute_visible
from compendium.infrastructure.interfaces import (
    LinkBackendProtocol,
    ProblemBackendProtocol,
)
from compendium.infrastructure.parsers import LogoParser

from .repository import RecordRepository


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TrackerService:
    """
    Session state for one user's problems and quick links.

    Every mutation is sent to the backend first; the local repositories are
    updated only with the records the backend returns. Mutations of the same
    problem id run one at a time.
    """

    def __init__(
        self,
        *,
        problem_backend: ProblemBackendProtocol,
        link_backend: LinkBackendProtocol,
        logo_parser: type[LogoParser] = LogoParser,
        schedule_on_create: bool = True,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize service with dependencies."""
        self.problem_backend = problem_backend
        self.link_backend = link_backend
        self.logo_parser = logo_parser
        self.schedule_on_create = schedule_on_create
        self.clock = clock

        self.problems: RecordRepository[Problem] = RecordRepository("problems")
        self.links: RecordRepository[QuickLink] = RecordRepository("links")
        self._locks: dict[str, asyncio.Lock] = {}

    def _lock_for(self, problem_id: RecordId) -> asyncio.Lock:
        return self._locks.setdefault(str(problem_id), asyncio.Lock())

    def _require_problem(self, problem_id: RecordId) -> Problem:
        problem = self.problems.get(problem_id)
        if problem is None:
            logger.warning(f"Problem {problem_id} is not loaded")
            raise NotFoundError(problem_id, what="Problem")
        return problem

    def _apply_saved(self, saved: Problem) -> None:
        if saved.id in self.problems:
            self.problems.replace(saved)
        else:
            logger.warning(f"Problem {saved.id} vanished before its update was applied")

    # Loading

    async def load_problems(self) -> bool:
        ticket = self.problems.begin_load()
        problems = await self.problem_backend.list_problems()
        return self.problems.load(problems, ticket)

    async def load_links(self) -> bool:
        ticket = self.links.begin_load()
        links = await self.link_backend.list_links()
        return self.links.load(links, ticket)

    async def load(self) -> None:
        """Fetch both collections from the backend."""
        logger.debug("Loading problems and links")
        await asyncio.gather(self.load_problems(), self.load_links())
        logger.info(f"Loaded {len(self.problems)} problem(s) and {len(self.links)} link(s)")

    # Problems

    async def add_problem(self, draft: ProblemDraft) -> Problem:
        draft = draft.validated()
        if (
            self.schedule_on_create
            and draft.revision_level == 0
            and draft.next_revision_date is None
        ):
            draft = replace(
                draft, next_revision_date=scheduling.initial_revision_date(self.clock())
            )

        problem = await self.problem_backend.create_problem(draft)
        self.problems.insert(problem)
        logger.info(f"Added problem {problem.id}: {problem.name}")
        return problem

    async def edit_problem(self, problem_id: RecordId, draft: ProblemDraft) -> Problem:
        """Replace the user-editable fields, keeping id, addedAt and revision state."""
        draft = draft.validated()
        async with self._lock_for(problem_id):
            current = self._require_problem(problem_id)
            saved = await self.problem_backend.update_problem(
                current.id, current.with_fields(draft)
            )
            self._apply_saved(saved)

        logger.info(f"Updated problem {problem_id}")
        return saved

    async def delete_problem(self, problem_id: RecordId) -> None:
        async with self._lock_for(problem_id):
            current = self._require_problem(problem_id)
            await self.problem_backend.delete_problem(current.id)
            self.problems.remove(current.id)

        self._locks.pop(str(current.id), None)
        logger.info(f"Deleted problem {problem_id}")

    async def mark_revised(self, problem_id: RecordId) -> Problem:
        """Record a review of the problem and schedule the next one."""
        async with self._lock_for(problem_id):
            current = self._require_problem(problem_id)
            revised = scheduling.mark_revised(current, self.clock())
            saved = await self.problem_backend.update_problem(current.id, revised)
            self._apply_saved(saved)

        logger.info(
            f"Problem {problem_id} revised to level {saved.revision_level}, "
            f"next revision {saved.next_revision_date}"
        )
        return saved

    def visible_problems(self, criteria: ViewCriteria) -> list[Problem]:
        return compute_visible(self.problems.all(), criteria)

    def due_today(self, today: date | None = None) -> list[Problem]:
        if today is None:
            today = scheduling.floor_to_day(self.clock())
        return compute_due_today(self.problems.all(), today)

    # Bulk transfer

    def export_problems(self) -> str:
        return export_snapshot(self.problems.all())

    async def import_problems(self, payload: str | bytes | list[Any]) -> list[Problem]:
        """
        Create every record of a snapshot through the backend batch endpoint.

        The repository is only extended once the backend has confirmed the
        whole batch.
        """
        records = import_snapshot(payload)
        if not records:
            logger.info("Import snapshot is empty, nothing to create")
            return []

        created = await self.problem_backend.create_problems_batch(records)
        self.problems.bulk_insert(created)
        logger.info(f"Imported {len(created)} problem(s)")
        return created

    # Quick links

    async def add_link(self, draft: QuickLinkDraft) -> QuickLink:
        draft = draft.validated()
        draft = replace(draft, logo_svg=self.logo_parser.sanitize(draft.logo_svg))

        link = await self.link_backend.create_link(draft)
        self.links.insert(link)
        logger.info(f"Added link {link.id}: {link.name}")
        return link

    async def delete_link(self, link_id: RecordId) -> None:
        link = self.links.get(link_id)
        if link is None:
            logger.warning(f"Link {link_id} is not loaded")
            raise NotFoundError(link_id, what="Link")

        await self.link_backend.delete_link(link.id)
        self.links.remove(link.id)
        logger.info(f"Deleted link {link_id}")
