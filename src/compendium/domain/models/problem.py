from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any

from ..exceptions import ValidationError

RecordId = int | str

MIN_RATING = 101


class Source(str, Enum):
    LEETCODE = "LeetCode"
    CODEFORCES = "Codeforces"
    ATCODER = "AtCoder"
    HACKERRANK = "HackerRank"
    OTHER = "Other"


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


def parse_source(value: Any) -> Source:
    try:
        return Source(value)
    except ValueError as e:
        raise ValidationError(f"Unknown problem source: {value!r}") from e


def parse_difficulty(value: Any) -> Difficulty:
    try:
        return Difficulty(value)
    except ValueError as e:
        raise ValidationError(f"Unknown difficulty: {value!r}") from e


def parse_timestamp(value: Any) -> datetime:
    """
    Parse ``addedAt`` given as ISO-8601 text or epoch milliseconds.

    Timestamps without an offset are taken as UTC so that all parsed
    values compare with each other.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid timestamp: {value!r}")

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise ValidationError(f"Invalid timestamp: {value!r}") from e
    else:
        raise ValidationError(f"Invalid timestamp: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_date(value: Any) -> date | None:
    """
    Parse a ``YYYY-MM-DD`` day, keeping ``None`` as "not scheduled".

    A full ISO-8601 timestamp is accepted and its calendar date kept; any
    other trailing text is rejected.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            if "T" in text:
                return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
            return date.fromisoformat(text)
        except ValueError as e:
            raise ValidationError(f"Invalid date: {value!r}") from e
    raise ValidationError(f"Invalid date: {value!r}")


def parse_rating(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"Invalid rating: {value!r}")
    try:
        rating = int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid rating: {value!r}") from e
    if rating < MIN_RATING:
        raise ValidationError(f"Rating must be at least {MIN_RATING}, got {rating}")
    return rating


def _required_text(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Field '{key}' is required")
    return value.strip()


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class ProblemDraft:
    """User-entered problem fields before the backend assigns id and addedAt."""

    name: str
    url: str
    source: Source
    difficulty: Difficulty
    rating: int | None = None
    submission_link: str | None = None
    remarks: str | None = None
    revision_level: int = 0
    next_revision_date: date | None = None

    def validated(self) -> ProblemDraft:
        """Return a copy with trimmed required fields, raising on bad input."""
        name = self.name.strip() if isinstance(self.name, str) else ""
        url = self.url.strip() if isinstance(self.url, str) else ""
        if not name:
            raise ValidationError("Problem name is required")
        if not url:
            raise ValidationError("Problem URL is required")
        if self.revision_level < 0:
            raise ValidationError("Revision level cannot be negative")
        return replace(
            self,
            name=name,
            url=url,
            source=parse_source(self.source),
            difficulty=parse_difficulty(self.difficulty),
            rating=parse_rating(self.rating),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "url": self.url,
            "source": Source(self.source).value,
            "difficulty": Difficulty(self.difficulty).value,
            "rating": self.rating,
            "submissionLink": self.submission_link,
            "remarks": self.remarks,
            "revisionLevel": self.revision_level,
            "nextRevisionDate": (
                self.next_revision_date.isoformat()
                if self.next_revision_date is not None
                else None
            ),
        }


@dataclass(frozen=True)
class Problem:
    """A tracked practice problem as confirmed by the backend."""

    id: RecordId
    name: str
    url: str
    source: Source
    difficulty: Difficulty
    added_at: datetime
    rating: int | None = None
    submission_link: str | None = None
    remarks: str | None = None
    revision_level: int = 0
    next_revision_date: date | None = None
    # Record exactly as the backend sent it, including fields not modelled here.
    raw: dict[str, Any] | None = field(default=None, compare=False, repr=False)

    def with_fields(self, draft: ProblemDraft) -> Problem:
        """Apply edited fields, keeping identity and revision state."""
        return replace(
            self,
            name=draft.name,
            url=draft.url,
            source=draft.source,
            difficulty=draft.difficulty,
            rating=draft.rating,
            submission_link=draft.submission_link,
            remarks=draft.remarks,
        )

    def to_dict(self) -> dict[str, Any]:
        """
        Wire form of the record.

        A record decoded from the backend and not changed since comes back
        exactly as received. A changed one keeps its extra backend fields
        and its original ``addedAt`` text, with the modelled fields updated.
        """
        record = self._encode()
        if self.raw is None:
            return record
        if Problem.from_dict(self.raw) == self:
            return dict(self.raw)

        merged = {**self.raw, **record}
        if "addedAt" in self.raw:
            merged["addedAt"] = self.raw["addedAt"]
        return merged

    def _encode(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "url": self.url,
            "source": self.source.value,
            "difficulty": self.difficulty.value,
            "rating": self.rating,
            "submissionLink": self.submission_link,
            "remarks": self.remarks,
            "addedAt": self.added_at.isoformat(),
            "revisionLevel": self.revision_level,
            "nextRevisionDate": (
                self.next_revision_date.isoformat()
                if self.next_revision_date is not None
                else None
            ),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Problem:
        if not isinstance(data, dict):
            raise ValidationError(f"Problem record must be an object, got {type(data).__name__}")
        if data.get("id") is None:
            raise ValidationError("Problem record has no id")
        if data.get("addedAt") is None:
            raise ValidationError(f"Problem {data['id']} has no addedAt")

        level = data.get("revisionLevel")
        if level is None:
            level = 0
        if isinstance(level, bool) or not isinstance(level, int) or level < 0:
            raise ValidationError(f"Invalid revision level: {level!r}")

        return cls(
            id=data["id"],
            name=_required_text(data, "name"),
            url=_required_text(data, "url"),
            source=parse_source(data.get("source")),
            difficulty=parse_difficulty(data.get("difficulty")),
            added_at=parse_timestamp(data["addedAt"]),
            rating=parse_rating(data.get("rating")),
            submission_link=_optional_text(data.get("submissionLink")),
            remarks=_optional_text(data.get("remarks")),
            revision_level=level,
            next_revision_date=parse_date(data.get("nextRevisionDate")),
            raw=dict(data),
        )
