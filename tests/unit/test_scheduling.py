"""Unit tests for the spaced-repetition schedule."""

from datetime import date, datetime, timedelta, timezone

import pytest

from compendium.domain.scheduling import (
    INTERVAL_TABLE,
    floor_to_day,
    initial_revision_date,
    interval_at,
    mark_revised,
    next_revision_date,
)


def test_interval_table_is_pinned():
    assert INTERVAL_TABLE == (2, 3, 5, 7, 11, 20, 30)


def test_interval_at_returns_none_past_the_table():
    assert interval_at(0) == 2
    assert interval_at(6) == 30
    assert interval_at(7) is None


def test_interval_at_rejects_negative_level():
    with pytest.raises(ValueError):
        interval_at(-1)


@pytest.mark.parametrize("level", [7, 8, 100])
def test_next_revision_date_is_none_once_cycle_is_complete(level):
    assert next_revision_date(level, datetime(2024, 5, 1, 12, 0)) is None


@pytest.mark.parametrize("level", range(len(INTERVAL_TABLE)))
def test_next_revision_date_adds_interval_days(level):
    base = date(2024, 2, 27)
    assert next_revision_date(level, base) == base + timedelta(days=INTERVAL_TABLE[level])


def test_next_revision_date_ignores_time_of_day():
    """Early morning and late evening on the same day give the same due date."""
    morning = datetime(2024, 3, 10, 0, 5)
    evening = datetime(2024, 3, 10, 23, 55)

    assert next_revision_date(1, morning) == next_revision_date(1, evening) == date(2024, 3, 13)


def test_floor_to_day_uses_utc_for_aware_datetimes():
    plus_five = timezone(timedelta(hours=5))
    # 02:00 at UTC+5 is still the previous day in UTC
    assert floor_to_day(datetime(2024, 3, 10, 2, 0, tzinfo=plus_five)) == date(2024, 3, 9)
    assert floor_to_day(date(2024, 3, 10)) == date(2024, 3, 10)


def test_mark_revised_increments_level_and_schedules(problem_factory):
    problem = problem_factory(revision_level=0, next_revision_date=date(2024, 1, 3))
    day = datetime(2024, 1, 3, 18, 30, tzinfo=timezone.utc)

    revised = mark_revised(problem, day)

    assert revised.revision_level == 1
    assert revised.next_revision_date == date(2024, 1, 6)
    assert revised.added_at == problem.added_at
    # Original record is untouched
    assert problem.revision_level == 0


def test_revision_scenario_from_level_zero(problem_factory):
    """Reviews on D and D+3 give D+3 then D+8; seven reviews finish the cycle."""
    d = date(2024, 6, 1)
    problem = problem_factory(revision_level=0)

    problem = mark_revised(problem, d)
    assert problem.revision_level == 1
    assert problem.next_revision_date == d + timedelta(days=3)

    problem = mark_revised(problem, d + timedelta(days=3))
    assert problem.revision_level == 2
    assert problem.next_revision_date == d + timedelta(days=8)

    for _ in range(5):
        problem = mark_revised(problem, d)
    assert problem.revision_level == 7
    assert problem.next_revision_date is None


def test_mark_revised_stays_unscheduled_after_cycle(problem_factory):
    problem = problem_factory(revision_level=0)
    for _ in range(len(INTERVAL_TABLE) + 3):
        problem = mark_revised(problem, date(2024, 1, 1))

    assert problem.revision_level == len(INTERVAL_TABLE) + 3
    assert problem.next_revision_date is None


def test_initial_revision_date_counts_creation_as_level_zero():
    assert initial_revision_date(datetime(2024, 1, 1, 9, 0)) == date(2024, 1, 3)
