"""Shared fixtures for tracker tests."""

from datetime import date, datetime, timezone

import pytest

from compendium.domain.models import Difficulty, Problem, Source


def make_problem(
    id=1,
    name="Two Sum",
    *,
    source=Source.LEETCODE,
    difficulty=Difficulty.EASY,
    added_at=None,
    rating=None,
    remarks=None,
    submission_link=None,
    revision_level=0,
    next_revision_date: date | None = None,
    url=None,
) -> Problem:
    return Problem(
        id=id,
        name=name,
        url=url or f"https://example.com/problems/{id}",
        source=source,
        difficulty=difficulty,
        added_at=added_at or datetime(2024, 1, 1, tzinfo=timezone.utc),
        rating=rating,
        submission_link=submission_link,
        remarks=remarks,
        revision_level=revision_level,
        next_revision_date=next_revision_date,
    )


@pytest.fixture
def problem_factory():
    return make_problem
