from .compendium_client import CompendiumApiClient
from .http_client import AsyncHTTPClient
from .interfaces import (
    HTTPClientProtocol,
    KeyValueStoreProtocol,
    LinkBackendProtocol,
    ProblemBackendProtocol,
)
from .preferences_store import JsonFileStore, MemoryStore

__all__ = [
    "AsyncHTTPClient",
    "CompendiumApiClient",
    "HTTPClientProtocol",
    "JsonFileStore",
    "KeyValueStoreProtocol",
    "LinkBackendProtocol",
    "MemoryStore",
    "ProblemBackendProtocol",
]
