"""Pydantic schemas for problem API endpoints."""

from datetime import date, datetime

from pydantic import ConfigDict, Field

from compendium.api.schemas.base import CamelModel
from compendium.domain.models import Difficulty, ProblemDraft, Source
from compendium.domain.models.problem import MIN_RATING


class ProblemRequest(CamelModel):
    """Fields a user enters when adding or editing a problem."""

    name: str = Field(min_length=1)
    url: str = Field(min_length=1)
    source: Source
    difficulty: Difficulty
    rating: int | None = Field(default=None, ge=MIN_RATING)
    submission_link: str | None = None
    remarks: str | None = None

    def to_draft(self) -> ProblemDraft:
        return ProblemDraft(
            name=self.name,
            url=self.url,
            source=self.source,
            difficulty=self.difficulty,
            rating=self.rating,
            submission_link=self.submission_link,
            remarks=self.remarks,
        )


class ProblemResponse(CamelModel):
    """Response containing a tracked problem."""

    model_config = ConfigDict(from_attributes=True)

    id: int | str
    name: str
    url: str
    source: Source
    difficulty: Difficulty
    rating: int | None = None
    submission_link: str | None = None
    remarks: str | None = None
    added_at: datetime
    revision_level: int
    next_revision_date: date | None = None  # None once every revision is done


class SyncResponse(CamelModel):
    """Collection sizes after reloading from the backend."""

    problems: int
    links: int


class ImportResponse(CamelModel):
    """Problems created from an imported snapshot."""

    imported: int
    problems: list[ProblemResponse]
