"""Application state: catalog, detection audit store, and retrieval config."""

import logging
from typing import Any, Optional

from retrieval.contracts import ContentCatalog, DetectionAuditStore
from retrieval.errors import CatalogError
from retrieval.models.config import RetrievalConfig

from .config import ServerConfig, get_config
from .services import InMemoryAuditStore, InMemoryCatalog, JsonCatalog, JsonlAuditStore

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(
        self,
        config: ServerConfig,
        catalog: Optional[ContentCatalog] = None,
        audit_store: Optional[DetectionAuditStore] = None,
        retrieval_config: Optional[RetrievalConfig] = None,
    ):
        self.config = config
        self.retrieval_config = retrieval_config or config.load_retrieval_config()

        # Catalog: JSON file when configured, else empty in-memory. None = failed to load.
        self.catalog: Optional[ContentCatalog] = (
            catalog if catalog is not None else self._create_catalog(config)
        )
        logger.info("[startup] Catalog: %s", type(self.catalog).__name__)

        # Audit store: JSONL when a path is set, else in-memory
        self.audit_store: DetectionAuditStore = (
            audit_store if audit_store is not None else self._create_audit_store(config)
        )
        logger.info("[startup] Audit store: %s", type(self.audit_store).__name__)

    def _create_catalog(self, config: ServerConfig) -> Optional[ContentCatalog]:
        """Create catalog from config (JSON file, else empty in-memory)."""
        if not config.catalog_json_path:
            logger.warning("[startup] CATALOG_JSON_PATH not set; serving an empty catalog")
            return InMemoryCatalog()
        try:
            return JsonCatalog(config.catalog_json_path)
        except CatalogError as e:
            logger.error("[startup] Catalog load failed: %s", e)
            return None

    def _create_audit_store(self, config: ServerConfig) -> Any:
        if config.audit_log_path:
            return JsonlAuditStore(config.audit_log_path)
        return InMemoryAuditStore()

    @property
    def is_loaded(self) -> bool:
        return self.catalog is not None


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState(get_config())
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace the global state (None resets it to load from config on next use)."""
    global _state
    _state = state
