"""JSON snapshot export and import of the problem collection."""

import json
from collections.abc import Iterable
from datetime import date
from typing import Any

from loguru import logger

from .exceptions import ImportFormatError
from .models.problem import Problem

EXPORT_FILENAME_PREFIX = "cp-compendium-backup"


def export_snapshot(problems: Iterable[Problem]) -> str:
    """Serialize the full collection, in order, as a JSON array."""
    records = [problem.to_dict() for problem in problems]
    logger.debug(f"Exporting {len(records)} problem(s)")
    return json.dumps(records, indent=2, ensure_ascii=False)


def export_filename(today: date) -> str:
    return f"{EXPORT_FILENAME_PREFIX}-{today.isoformat()}.json"


def import_snapshot(payload: str | bytes | list[Any]) -> list[dict[str, Any]]:
    """
    Structural gate for an imported snapshot.

    Accepts only a JSON array of objects. Anything else is rejected as a
    whole; fields inside each record are left to the backend to validate.
    """
    if isinstance(payload, (str, bytes)):
        try:
            data = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ImportFormatError(f"Import file is not valid JSON: {e}") from e
    else:
        data = payload

    if not isinstance(data, list):
        raise ImportFormatError(
            f"Import file must contain a list of problems, got {type(data).__name__}"
        )

    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise ImportFormatError(
                f"Import entry {index} is not a problem record: {type(record).__name__}"
            )

    logger.info(f"Accepted import snapshot with {len(data)} record(s)")
    return data
