"""In-memory mirror of the records confirmed by the backend."""

from collections.abc import Iterable, Iterator
from typing import Generic, Protocol, TypeVar

from loguru import logger

from compendium.domain.exceptions import DuplicateIdError, NotFoundError
from compendium.domain.models import RecordId


class _Identified(Protocol):
    @property
    def id(self) -> RecordId: ...


T = TypeVar("T", bound=_Identified)


class RecordRepository(Generic[T]):
    """
    Ordered collection of records keyed by id.

    Callers mutate it only after the backend has confirmed the change.
    Loads are tagged with tickets so that a slow fetch finishing after a
    newer one cannot overwrite fresher data.
    """

    def __init__(self, name: str = "records"):
        self.name = name
        self._records: list[T] = []
        self._latest_ticket = 0

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._records))

    def __contains__(self, record_id: object) -> bool:
        return self._index_of(record_id) is not None

    def _index_of(self, record_id: object) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == record_id or str(record.id) == str(record_id):
                return index
        return None

    def all(self) -> tuple[T, ...]:
        return tuple(self._records)

    def get(self, record_id: RecordId) -> T | None:
        index = self._index_of(record_id)
        return self._records[index] if index is not None else None

    def begin_load(self) -> int:
        """Start a load and return its ticket."""
        self._latest_ticket += 1
        return self._latest_ticket

    def load(self, records: Iterable[T], ticket: int | None = None) -> bool:
        """
        Replace the whole collection.

        Returns False, leaving the collection untouched, when ``ticket``
        belongs to a load superseded by a newer one.
        """
        if ticket is None:
            ticket = self.begin_load()
        if ticket != self._latest_ticket:
            logger.warning(
                f"Discarding stale {self.name} load (ticket {ticket}, latest {self._latest_ticket})"
            )
            return False

        records = list(records)
        seen: set[RecordId] = set()
        for record in records:
            if record.id in seen:
                logger.error(f"Duplicate id {record.id} in {self.name} load")
                raise DuplicateIdError(record.id)
            seen.add(record.id)

        self._records = records
        logger.debug(f"Loaded {len(records)} {self.name}")
        return True

    def insert(self, record: T) -> None:
        if record.id in self:
            logger.error(f"Refusing to insert duplicate {self.name} id {record.id}")
            raise DuplicateIdError(record.id)
        self._records.append(record)

    def replace(self, record: T) -> None:
        index = self._index_of(record.id)
        if index is None:
            raise NotFoundError(record.id, what=self.name)
        self._records[index] = record

    def remove(self, record_id: RecordId) -> bool:
        """Delete by id. Returns False when there was nothing to delete."""
        index = self._index_of(record_id)
        if index is None:
            logger.warning(f"Cannot remove {self.name} id {record_id}: not present")
            return False
        del self._records[index]
        return True

    def bulk_insert(self, records: Iterable[T]) -> None:
        """Append many records; a single duplicate rejects the whole batch."""
        records = list(records)
        seen: set[RecordId] = set()
        for record in records:
            if record.id in seen or record.id in self:
                logger.error(f"Refusing bulk insert into {self.name}: duplicate id {record.id}")
                raise DuplicateIdError(record.id)
            seen.add(record.id)
        self._records.extend(records)
