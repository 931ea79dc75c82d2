"""Pydantic schemas for session preference endpoints."""

from typing import Any

from pydantic import ConfigDict

from compendium.api.schemas.base import CamelModel


class PreferencesResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    user: dict[str, Any] | None = None
    heading: str
    accent_hue: str
    animations_on: bool
    background_url: str | None = None


class PreferencesUpdate(CamelModel):
    """Partial update; only fields present in the request are changed."""

    user: dict[str, Any] | None = None
    heading: str | None = None
    accent_hue: str | None = None
    animations_on: bool | None = None
    background_url: str | None = None


class AccentColorResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    hue: str
