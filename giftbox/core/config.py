"""
Configuration helpers for the gift service.

Routers/services read settings through get_settings() instead of touching
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "gifts.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    data_file: Path
    persistent: bool
    database_url: str
    default_principal: str
    default_page_size: int
    log_level: str
    log_file: str | None


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_backend=(os.getenv("GIFTS_STORAGE") or "json").strip().lower(),
        data_file=Path(os.getenv("GIFTS_DATA_FILE") or DEFAULT_DATA_FILE),
        persistent=_bool(os.getenv("GIFTS_PERSISTENT"), True),
        database_url=os.getenv("DATABASE_URL", ""),
        default_principal=os.getenv("DEFAULT_PRINCIPAL", "anonymous").strip() or "anonymous",
        default_page_size=max(0, _int(os.getenv("DEFAULT_PAGE_SIZE", "25"), 25)),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=os.getenv("LOG_FILE") or None,
    )
