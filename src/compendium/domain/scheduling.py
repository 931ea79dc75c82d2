"""Spaced-repetition schedule for problem revisions."""

from dataclasses import replace
from datetime import date, datetime, timedelta, timezone

from loguru import logger

from .models.problem import Problem

# Days until the next review, indexed by revision level.
INTERVAL_TABLE: tuple[int, ...] = (2, 3, 5, 7, 11, 20, 30)


def interval_at(level: int) -> int | None:
    """Return the day offset for ``level``, or None once the curve is exhausted."""
    if level < 0:
        raise ValueError(f"Revision level cannot be negative: {level}")
    if level >= len(INTERVAL_TABLE):
        return None
    return INTERVAL_TABLE[level]


def floor_to_day(base_date: datetime | date) -> date:
    """Drop the time of day. Aware datetimes are floored in UTC."""
    if isinstance(base_date, datetime):
        if base_date.tzinfo is not None:
            base_date = base_date.astimezone(timezone.utc)
        return base_date.date()
    return base_date


def next_revision_date(revision_level: int, base_date: datetime | date) -> date | None:
    """
    Compute the day a problem at ``revision_level`` is due again.

    Returns None when the level is past the end of the interval table,
    i.e. the review cycle is complete.
    """
    days = interval_at(revision_level)
    if days is None:
        return None
    return floor_to_day(base_date) + timedelta(days=days)


def mark_revised(problem: Problem, now: datetime | date | None = None) -> Problem:
    """Advance ``problem`` by one review performed at ``now``."""
    if now is None:
        now = datetime.now(timezone.utc)

    level = problem.revision_level + 1
    due = next_revision_date(level, now)

    logger.debug(f"Problem {problem.id} revised: level {problem.revision_level} -> {level}, due {due}")
    return replace(problem, revision_level=level, next_revision_date=due)


def initial_revision_date(added_at: datetime | date) -> date | None:
    """Due date of a freshly added problem, treating creation as the level 0 review."""
    return next_revision_date(0, added_at)
