"""Service for the persisted, cosmetic session preferences."""

import json
from dataclasses import dataclass, fields, replace
from typing import Any

from loguru import logger

from compendium.domain.exceptions import ValidationError
from compendium.infrastructure.interfaces import KeyValueStoreProtocol

DEFAULT_HEADING = "Competitive Programming Compendium"


@dataclass(frozen=True)
class AccentColor:
    name: str
    hue: str


ACCENT_COLORS: tuple[AccentColor, ...] = (
    AccentColor("Blue", "210"),
    AccentColor("Green", "145"),
    AccentColor("Red", "350"),
    AccentColor("Purple", "260"),
    AccentColor("Orange", "30"),
)


@dataclass(frozen=True)
class Preferences:
    """Snapshot of the session preferences."""

    user: dict[str, Any] | None = None
    heading: str = DEFAULT_HEADING
    accent_hue: str = "210"
    animations_on: bool = True
    background_url: str | None = None

    @property
    def user_id(self) -> str | int | None:
        if self.user is None:
            return None
        return self.user.get("id")


# Storage keys, one per preference field.
PREFERENCE_KEYS: dict[str, str] = {
    "user": "cp-user",
    "heading": "cp-heading",
    "accent_hue": "cp-accent-hue",
    "animations_on": "cp-animations-on",
    "background_url": "cp-background-url",
}


def _check(field_name: str, value: Any) -> Any:
    """Validate one preference value, raising ValidationError on a bad type."""
    if field_name == "user":
        if value is not None and not isinstance(value, dict):
            raise ValidationError("user must be an object or null")
    elif field_name == "heading":
        if not isinstance(value, str):
            raise ValidationError("heading must be a string")
    elif field_name == "accent_hue":
        if value not in {color.hue for color in ACCENT_COLORS}:
            raise ValidationError(f"Unknown accent hue: {value!r}")
    elif field_name == "animations_on":
        if not isinstance(value, bool):
            raise ValidationError("animations_on must be a boolean")
    elif field_name == "background_url":
        if value is not None and not isinstance(value, str):
            raise ValidationError("background_url must be a string or null")
    return value


class PreferencesService:
    """
    Preferences read once from the store and written back on every change.

    Values are JSON-encoded per key. Unreadable values fall back to their
    defaults; write failures are logged by the store and never raised.
    """

    def __init__(self, store: KeyValueStoreProtocol):
        self.store = store
        self._current = self._read_all()

    @property
    def current(self) -> Preferences:
        return self._current

    def _read_all(self) -> Preferences:
        defaults = Preferences()
        values: dict[str, Any] = {}
        for field in fields(Preferences):
            key = PREFERENCE_KEYS[field.name]
            default = getattr(defaults, field.name)
            raw = self.store.read(key)
            if raw is None:
                values[field.name] = default
                continue
            try:
                values[field.name] = _check(field.name, json.loads(raw))
            except (ValueError, ValidationError) as e:
                logger.warning(f"Ignoring stored preference {key}: {e}")
                values[field.name] = default
        return Preferences(**values)

    def update(self, **changes: Any) -> Preferences:
        """Apply and persist the given preference changes."""
        unknown = set(changes) - set(PREFERENCE_KEYS)
        if unknown:
            raise ValidationError(f"Unknown preference(s): {', '.join(sorted(unknown))}")

        for name, value in changes.items():
            _check(name, value)

        updated = replace(self._current, **changes)
        for name, value in changes.items():
            if self.store.write(PREFERENCE_KEYS[name], json.dumps(value)):
                logger.debug(f"Saved preference {PREFERENCE_KEYS[name]}")

        self._current = updated
        return updated

    def logout(self) -> Preferences:
        """Drop the stored session user."""
        self.store.remove(PREFERENCE_KEYS["user"])
        self._current = replace(self._current, user=None)
        logger.info("Session user cleared")
        return self._current

    def reset(self) -> Preferences:
        """Forget every stored preference."""
        for key in PREFERENCE_KEYS.values():
            self.store.remove(key)
        self._current = Preferences()
        logger.info("Preferences reset to defaults")
        return self._current
