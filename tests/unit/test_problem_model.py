"""Unit tests for problem records and drafts."""

from datetime import date, datetime, timezone

import pytest

from compendium.domain.exceptions import ValidationError
from compendium.domain.models import Difficulty, Problem, ProblemDraft, Source


def _record(**overrides):
    record = {
        "id": 12,
        "name": "Watermelon",
        "url": "https://codeforces.com/problemset/problem/4/A",
        "source": "Codeforces",
        "difficulty": "Easy",
        "rating": 800,
        "submissionLink": None,
        "remarks": None,
        "addedAt": "2024-01-15T10:30:00Z",
        "revisionLevel": 2,
        "nextRevisionDate": "2024-01-20",
    }
    record.update(overrides)
    return record


def test_from_dict_parses_wire_record():
    problem = Problem.from_dict(_record())

    assert problem.id == 12
    assert problem.source is Source.CODEFORCES
    assert problem.difficulty is Difficulty.EASY
    assert problem.added_at == datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
    assert problem.revision_level == 2
    assert problem.next_revision_date == date(2024, 1, 20)


def test_from_dict_defaults_missing_revision_fields():
    record = _record()
    del record["revisionLevel"]
    del record["nextRevisionDate"]

    problem = Problem.from_dict(record)

    assert problem.revision_level == 0
    assert problem.next_revision_date is None


def test_from_dict_accepts_epoch_milliseconds():
    problem = Problem.from_dict(_record(addedAt=1700000000000))

    assert problem.added_at == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "overrides",
    [
        {"id": None},
        {"name": "   "},
        {"source": "TopCoder"},
        {"difficulty": "Trivial"},
        {"rating": 100},
        {"addedAt": "yesterday"},
        {"revisionLevel": -1},
        {"nextRevisionDate": "soon"},
    ],
)
def test_from_dict_rejects_malformed_records(overrides):
    with pytest.raises(ValidationError):
        Problem.from_dict(_record(**overrides))


def test_draft_validation_trims_required_fields():
    draft = ProblemDraft(
        name="  Two Sum ",
        url=" https://leetcode.com/problems/two-sum/ ",
        source="LeetCode",
        difficulty="Easy",
        rating=None,
    ).validated()

    assert draft.name == "Two Sum"
    assert draft.url == "https://leetcode.com/problems/two-sum/"
    assert draft.source is Source.LEETCODE


@pytest.mark.parametrize(
    "name, url, rating",
    [
        ("", "https://example.com", None),
        ("Name", "   ", None),
        ("Name", "https://example.com", 42),
    ],
)
def test_draft_validation_rejects_bad_input(name, url, rating):
    draft = ProblemDraft(
        name=name, url=url, source=Source.OTHER, difficulty=Difficulty.HARD, rating=rating
    )
    with pytest.raises(ValidationError):
        draft.validated()


def test_with_fields_keeps_identity_and_revision_state(problem_factory):
    problem = problem_factory(5, "Old", revision_level=4, next_revision_date=date(2024, 2, 2))
    draft = ProblemDraft(
        name="New", url="https://example.com/new", source=Source.ATCODER,
        difficulty=Difficulty.MEDIUM, rating=1200, remarks="edited",
    )

    edited = problem.with_fields(draft)

    assert edited.id == 5
    assert edited.added_at == problem.added_at
    assert edited.revision_level == 4
    assert edited.next_revision_date == date(2024, 2, 2)
    assert edited.name == "New"
    assert edited.remarks == "edited"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("2024-01-20", date(2024, 1, 20)),
        (" 2024-01-20 ", date(2024, 1, 20)),
        ("2024-01-20T00:00:00.000Z", date(2024, 1, 20)),
        (None, None),
    ],
)
def test_next_revision_date_formats(value, expected):
    assert Problem.from_dict(_record(nextRevisionDate=value)).next_revision_date == expected


@pytest.mark.parametrize("value", ["2024-01-01garbage", "2024-01-01 later", "2024-13-01"])
def test_next_revision_date_rejects_trailing_text(value):
    with pytest.raises(ValidationError):
        Problem.from_dict(_record(nextRevisionDate=value))
