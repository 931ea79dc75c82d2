"""Read-side derivations of the problem list: visible view and revision queue."""

from collections.abc import Iterable
from datetime import date
from typing import Any

from .models.criteria import ALL, SortConfig, SortDirection, SortKey, ViewCriteria
from .models.problem import Difficulty, Problem, Source


def _sort_value(problem: Problem, key: SortKey) -> Any:
    if key is SortKey.ADDED_AT:
        return problem.added_at
    if key is SortKey.NAME:
        return problem.name.casefold() if problem.name is not None else None
    if key is SortKey.RATING:
        return problem.rating
    return problem.next_revision_date


def _text(value: str | None) -> str:
    return value if value is not None else ""


def search(problems: Iterable[Problem], search_term: str) -> list[Problem]:
    """Keep problems whose name, source, difficulty or remarks contain the term."""
    needle = search_term.casefold()
    if not needle:
        return list(problems)

    def matches(problem: Problem) -> bool:
        haystacks = (
            _text(problem.name),
            problem.source.value,
            problem.difficulty.value,
            _text(problem.remarks),
        )
        return any(needle in field.casefold() for field in haystacks)

    return [p for p in problems if matches(p)]


def filter_by_source(problems: Iterable[Problem], source: Source | str) -> list[Problem]:
    if source == ALL:
        return list(problems)
    return [p for p in problems if p.source == source]


def filter_by_difficulty(problems: Iterable[Problem], difficulty: Difficulty | str) -> list[Problem]:
    if difficulty == ALL:
        return list(problems)
    return [p for p in problems if p.difficulty == difficulty]


def sort_problems(problems: Iterable[Problem], sort_config: SortConfig) -> list[Problem]:
    """
    Stable sort by the configured key.

    Problems without a value for the key always go last, in input order,
    whichever direction is requested.
    """
    present: list[Problem] = []
    missing: list[Problem] = []
    for problem in problems:
        if _sort_value(problem, sort_config.key) is None:
            missing.append(problem)
        else:
            present.append(problem)

    ordered = sorted(
        present,
        key=lambda p: _sort_value(p, sort_config.key),
        reverse=sort_config.direction is SortDirection.DESC,
    )
    return ordered + missing


def compute_visible(problems: Iterable[Problem], criteria: ViewCriteria) -> list[Problem]:
    """Search, then filter by source and difficulty, then sort."""
    visible = search(problems, criteria.search_term)
    visible = filter_by_source(visible, criteria.filter_source)
    visible = filter_by_difficulty(visible, criteria.filter_difficulty)
    return sort_problems(visible, criteria.sort_config)


def compute_due_today(problems: Iterable[Problem], today: date) -> list[Problem]:
    """Problems due on or before ``today``, soonest first."""
    due = [
        p
        for p in problems
        if p.next_revision_date is not None and p.next_revision_date <= today
    ]
    return sorted(due, key=lambda p: p.next_revision_date)
