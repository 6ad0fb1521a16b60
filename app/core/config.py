"""Application configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
import os

DEFAULT_ENVIRONMENT = "production"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CORS_ORIGINS = ("http://localhost:5000", "https://localhost:5001")
DEFAULT_WEB_ROOT = "WebRoot"


def _get_list_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _get_log_level_env(name: str, default: str) -> str:
    raw = os.getenv(name, default).strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        raise ValueError(f"Unsupported log level: {raw}")
    return raw


@dataclass(frozen=True)
class AppSettings:
    """Runtime settings for the greeting service."""

    environment: str
    log_level: str
    cors_origins: tuple[str, ...]
    web_root: str

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    def safe_for_logging(self) -> dict[str, str | list[str]]:
        """Return application settings safe for logs."""
        return {
            "environment": self.environment,
            "log_level": self.log_level,
            "cors_origins": list(self.cors_origins),
            "web_root": self.web_root,
        }


@lru_cache(maxsize=1)
def get_app_settings() -> AppSettings:
    """Load application settings from the environment."""
    return AppSettings(
        environment=os.getenv("GREETER_ENVIRONMENT", DEFAULT_ENVIRONMENT).strip().lower(),
        log_level=_get_log_level_env("GREETER_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        cors_origins=_get_list_env("GREETER_CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
        web_root=os.getenv("GREETER_WEB_ROOT", os.path.join(os.getcwd(), DEFAULT_WEB_ROOT)),
    )
