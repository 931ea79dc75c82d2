"""Unit tests for the revision queue."""

from datetime import date

from compendium.domain.view import compute_due_today


def test_due_queue_keeps_due_problems_soonest_first(problem_factory):
    today = date(2024, 5, 10)
    problems = [
        problem_factory(1, "later", next_revision_date=date(2024, 5, 11)),
        problem_factory(2, "today", next_revision_date=today),
        problem_factory(3, "finished", next_revision_date=None, revision_level=7),
        problem_factory(4, "overdue", next_revision_date=date(2024, 5, 1)),
        problem_factory(5, "also today", next_revision_date=today),
    ]

    due = compute_due_today(problems, today)

    assert [p.id for p in due] == [4, 2, 5]


def test_due_queue_never_contains_unscheduled_problems(problem_factory):
    problems = [problem_factory(i, next_revision_date=None) for i in range(3)]

    assert compute_due_today(problems, date(2030, 1, 1)) == []


def test_due_queue_includes_problem_due_exactly_today(problem_factory):
    problem = problem_factory(next_revision_date=date(2024, 2, 29))

    assert compute_due_today([problem], date(2024, 2, 29)) == [problem]
    assert compute_due_today([problem], date(2024, 2, 28)) == []
