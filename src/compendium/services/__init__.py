from compendium.config import Settings
from compendium.infrastructure.http_client import AsyncHTTPClient
from compendium.services.preferences import PreferencesService
from compendium.services.repository import RecordRepository
from compendium.services.tracker import TrackerService


def create_preferences_service(settings: Settings) -> PreferencesService:
    """Factory function to create the preferences service and its store."""
    from compendium.infrastructure.preferences_store import JsonFileStore, MemoryStore

    if settings.preferences_path is None:
        return PreferencesService(MemoryStore())
    return PreferencesService(JsonFileStore(settings.preferences_path))


def create_tracker_service(
    settings: Settings,
    preferences: PreferencesService,
) -> tuple[TrackerService, AsyncHTTPClient]:
    """Factory function to create tracker service with all dependencies."""
    from compendium.infrastructure.compendium_client import CompendiumApiClient

    # Create infrastructure dependencies
    http_client = AsyncHTTPClient(
        settings.api_base_url,
        timeout=settings.request_timeout,
        user_id_provider=lambda: preferences.current.user_id,
    )
    api_client = CompendiumApiClient(http_client)

    service = TrackerService(
        problem_backend=api_client,
        link_backend=api_client,
        schedule_on_create=settings.schedule_on_create,
    )
    return service, http_client


__all__ = [
    "PreferencesService",
    "RecordRepository",
    "TrackerService",
    "create_preferences_service",
    "create_tracker_service",
]
