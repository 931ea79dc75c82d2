from litestar.datastructures import State

from compendium.services.preferences import PreferencesService
from compendium.services.tracker import TrackerService


async def provide_tracker_service(state: State) -> TrackerService:
    return state.tracker


async def provide_preferences_service(state: State) -> PreferencesService:
    return state.preferences
