"""
Server Configuration

Host, port, and log level plus the catalog, audit log, and retrieval config paths,
read from environment variables (a project-root .env is loaded first).
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from retrieval.models.config import RetrievalConfig

# Single .env at the project root
root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Catalog: JSON document with "workouts" and "recipes" arrays. None = empty in-memory catalog.
    catalog_json_path: Optional[Path] = None
    # Detection audit sink: JSONL file. None = in-memory audit store.
    audit_log_path: Optional[Path] = None
    # Optional grouped JSON overrides for RetrievalConfig (see RetrievalConfig.from_dict)
    retrieval_config_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent

        def _path_env(key: str) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return None
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            catalog_json_path=_path_env("CATALOG_JSON_PATH"),
            audit_log_path=_path_env("AUDIT_LOG_PATH"),
            retrieval_config_path=_path_env("RETRIEVAL_CONFIG_PATH"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.catalog_json_path and not self.catalog_json_path.is_file():
            errors.append(f"Catalog file not found: {self.catalog_json_path}")

        if self.retrieval_config_path and not self.retrieval_config_path.is_file():
            errors.append(f"Retrieval config file not found: {self.retrieval_config_path}")

        # Audit log file is created on first write

        return len(errors) == 0, errors

    def load_retrieval_config(self) -> RetrievalConfig:
        """RetrievalConfig from retrieval_config_path, or defaults."""
        if not self.retrieval_config_path:
            return RetrievalConfig()
        with open(self.retrieval_config_path) as f:
            return RetrievalConfig.from_dict(json.load(f))


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
