"""Value objects describing how the problem list is searched, filtered and sorted."""

from dataclasses import dataclass, field
from enum import Enum

from ..exceptions import ValidationError
from .problem import Difficulty, Source

ALL = "All"


class SortKey(str, Enum):
    ADDED_AT = "addedAt"
    NAME = "name"
    RATING = "rating"
    NEXT_REVISION_DATE = "nextRevisionDate"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortConfig:
    key: SortKey = SortKey.ADDED_AT
    direction: SortDirection = SortDirection.DESC

    def __str__(self) -> str:
        return f"{self.key.value}:{self.direction.value}"

    @classmethod
    def parse(cls, value: str) -> "SortConfig":
        """Parse ``"<key>:<direction>"``, e.g. ``"rating:desc"``."""
        key, sep, direction = value.partition(":")
        try:
            return cls(
                key=SortKey(key.strip()),
                direction=SortDirection(direction.strip() if sep else "asc"),
            )
        except ValueError as e:
            raise ValidationError(f"Invalid sort option: {value!r}") from e


@dataclass(frozen=True)
class ViewCriteria:
    """Session-local list criteria chosen by the user."""

    search_term: str = ""
    filter_source: Source | str = ALL
    filter_difficulty: Difficulty | str = ALL
    sort_config: SortConfig = field(default_factory=SortConfig)

    @classmethod
    def build(
        cls,
        search_term: str = "",
        filter_source: str = ALL,
        filter_difficulty: str = ALL,
        sort: str | SortConfig | None = None,
    ) -> "ViewCriteria":
        """Build criteria from raw query values, validating the enum choices."""
        source: Source | str = ALL
        if filter_source != ALL:
            try:
                source = Source(filter_source)
            except ValueError as e:
                raise ValidationError(f"Unknown source filter: {filter_source!r}") from e

        difficulty: Difficulty | str = ALL
        if filter_difficulty != ALL:
            try:
                difficulty = Difficulty(filter_difficulty)
            except ValueError as e:
                raise ValidationError(
                    f"Unknown difficulty filter: {filter_difficulty!r}"
                ) from e

        if sort is None:
            sort_config = SortConfig()
        elif isinstance(sort, SortConfig):
            sort_config = sort
        else:
            sort_config = SortConfig.parse(sort)

        return cls(
            search_term=search_term,
            filter_source=source,
            filter_difficulty=difficulty,
            sort_config=sort_config,
        )
