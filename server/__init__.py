"""
Fitsnap Retrieval Server

Usage: uvicorn server:app --reload --port 8000
"""

from .app import app, create_app
from .config import ServerConfig, get_config, reload_config
from .services import (
    InMemoryAuditStore,
    InMemoryCatalog,
    JsonCatalog,
    JsonlAuditStore,
    NullAuditStore,
)
from .state import AppState, get_state, set_state

__all__ = [
    "app",
    "create_app",
    "AppState",
    "ServerConfig",
    "get_config",
    "get_state",
    "reload_config",
    "set_state",
    "InMemoryAuditStore",
    "InMemoryCatalog",
    "JsonCatalog",
    "JsonlAuditStore",
    "NullAuditStore",
]
