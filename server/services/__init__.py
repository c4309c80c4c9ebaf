"""Backing logic: catalog and detection audit store implementations."""

from .audit_store import InMemoryAuditStore, JsonlAuditStore, NullAuditStore
from .catalog import InMemoryCatalog, JsonCatalog

__all__ = [
    "InMemoryAuditStore",
    "InMemoryCatalog",
    "JsonCatalog",
    "JsonlAuditStore",
    "NullAuditStore",
]
