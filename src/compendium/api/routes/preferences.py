"""API routes for session preferences."""

from litestar import Controller, get, patch, post
from litestar.status_codes import HTTP_200_OK

from compendium.api.schemas.preferences import (
    AccentColorResponse,
    PreferencesResponse,
    PreferencesUpdate,
)
from compendium.services.preferences import ACCENT_COLORS, PreferencesService


class PreferencesController(Controller):
    """Controller for heading, accent colour, animation and background settings."""

    path = "/preferences"

    @get("/", status_code=HTTP_200_OK)
    async def get_preferences(self, preferences: PreferencesService) -> PreferencesResponse:
        return PreferencesResponse.model_validate(preferences.current)

    @patch("/", status_code=HTTP_200_OK)
    async def update_preferences(
        self, preferences: PreferencesService, data: PreferencesUpdate
    ) -> PreferencesResponse:
        updated = preferences.update(**data.model_dump(exclude_unset=True))
        return PreferencesResponse.model_validate(updated)

    @get("/accents", status_code=HTTP_200_OK)
    async def accents(self) -> list[AccentColorResponse]:
        return [AccentColorResponse.model_validate(color) for color in ACCENT_COLORS]

    @post("/logout", status_code=HTTP_200_OK)
    async def logout(self, preferences: PreferencesService) -> PreferencesResponse:
        """Forget the session user; other preferences are kept."""
        return PreferencesResponse.model_validate(preferences.logout())

    @post("/reset", status_code=HTTP_200_OK)
    async def reset(self, preferences: PreferencesService) -> PreferencesResponse:
        return PreferencesResponse.model_validate(preferences.reset())
