from pathlib import Path

import pytest

from compendium import config
from compendium.config import DEFAULT_API_BASE_URL, Settings, load_settings
from compendium.infrastructure.preferences_store import JsonFileStore, MemoryStore
from compendium.services import create_preferences_service

ENV_VARS = (
    "COMPENDIUM_API_BASE_URL",
    "COMPENDIUM_REQUEST_TIMEOUT",
    "COMPENDIUM_PREFERENCES_PATH",
    "COMPENDIUM_SCHEDULE_ON_CREATE",
    "COMPENDIUM_LOG_LEVEL",
    "COMPENDIUM_HOST",
    "COMPENDIUM_PORT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda: None)
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment():
    assert load_settings() == Settings()
    assert Settings().api_base_url == DEFAULT_API_BASE_URL


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("COMPENDIUM_API_BASE_URL", "https://tracker.example.com/api/")
    monkeypatch.setenv("COMPENDIUM_REQUEST_TIMEOUT", "2.5")
    monkeypatch.setenv("COMPENDIUM_PREFERENCES_PATH", "/tmp/prefs.json")
    monkeypatch.setenv("COMPENDIUM_SCHEDULE_ON_CREATE", "off")
    monkeypatch.setenv("COMPENDIUM_LOG_LEVEL", "debug")
    monkeypatch.setenv("COMPENDIUM_PORT", "9000")

    settings = load_settings()

    assert settings.api_base_url == "https://tracker.example.com/api"
    assert settings.request_timeout == 2.5
    assert settings.preferences_path == Path("/tmp/prefs.json")
    assert settings.schedule_on_create is False
    assert settings.log_level == "DEBUG"
    assert settings.port == 9000


def test_bad_boolean_is_rejected(monkeypatch):
    monkeypatch.setenv("COMPENDIUM_SCHEDULE_ON_CREATE", "maybe")

    with pytest.raises(ValueError):
        load_settings()


def test_empty_preferences_path_keeps_preferences_in_memory(monkeypatch):
    monkeypatch.setenv("COMPENDIUM_PREFERENCES_PATH", "")

    settings = load_settings()
    service = create_preferences_service(settings)

    assert settings.preferences_path is None
    assert isinstance(service.store, MemoryStore)


def test_preferences_file_is_used_when_configured(tmp_path):
    service = create_preferences_service(Settings(preferences_path=tmp_path / "prefs.json"))

    assert isinstance(service.store, JsonFileStore)
