"""File-backed key/value store for session preferences."""

import json
from pathlib import Path

from loguru import logger

from .interfaces import KeyValueStoreProtocol


class JsonFileStore(KeyValueStoreProtocol):
    """
    Key/value strings kept in a single JSON object on disk.

    Failures to read or write are logged and reported through return
    values; they never raise.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read preferences from {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring preferences file {self.path}: not a JSON object")
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _save(self, data: dict[str, str]) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            logger.warning(f"Failed to write preferences to {self.path}: {e}")
            return False
        return True

    def read(self, key: str) -> str | None:
        return self._load().get(key)

    def write(self, key: str, value: str) -> bool:
        data = self._load()
        data[key] = value
        return self._save(data)

    def remove(self, key: str) -> bool:
        data = self._load()
        if key not in data:
            return True
        del data[key]
        return self._save(data)


class MemoryStore(KeyValueStoreProtocol):
    """In-process store, used when no preferences file is configured."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def read(self, key: str) -> str | None:
        return self.data.get(key)

    def write(self, key: str, value: str) -> bool:
        self.data[key] = value
        return True

    def remove(self, key: str) -> bool:
        self.data.pop(key, None)
        return True
