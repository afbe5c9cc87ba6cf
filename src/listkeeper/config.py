"""
Configuration for the listkeeper server.

Settings come from ``LISTKEEPER_*`` environment variables so that the app
factory and the entry point never read ``os.environ`` directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    db_dir: str = "db"
    host: str = "0.0.0.0"
    port: int = 1337
    api_prefix: str = "/api"
    log_level: str = "info"


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    prefix = os.getenv("LISTKEEPER_API_PREFIX", "/api").strip().rstrip("/")
    if prefix and not prefix.startswith("/"):
        prefix = "/" + prefix

    return Settings(
        db_dir=os.getenv("LISTKEEPER_DB_DIR", "db"),
        host=os.getenv("LISTKEEPER_HOST", "0.0.0.0"),
        port=_int(os.getenv("LISTKEEPER_PORT", "1337"), 1337),
        api_prefix=prefix,
        log_level=(os.getenv("LISTKEEPER_LOG_LEVEL") or "info").lower(),
    )
