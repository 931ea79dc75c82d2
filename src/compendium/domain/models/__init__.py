"""Domain models package."""

from .criteria import ALL, SortConfig, SortDirection, SortKey, ViewCriteria
from .link import QuickLink, QuickLinkDraft
from .problem import Difficulty, Problem, ProblemDraft, RecordId, Source

__all__ = [
    "ALL",
    "Difficulty",
    "Problem",
    "ProblemDraft",
    "QuickLink",
    "QuickLinkDraft",
    "RecordId",
    "SortConfig",
    "SortDirection",
    "SortKey",
    "Source",
    "ViewCriteria",
]
