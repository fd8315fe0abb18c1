# app/config.py
"""
Runtime settings for the catalog service.

Every field reads an environment variable and falls back to a default,
so an unconfigured process listens on port 9090 with lenient body
decoding. Variables must be set before this module is imported.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("CATALOG_PROJECT_NAME", "product-catalog")
    api_version: str = os.getenv("CATALOG_API_VERSION", "1.0.0")
    host: str = os.getenv("CATALOG_HOST", "0.0.0.0")
    port: int = int(os.getenv("CATALOG_PORT", "9090"))
    log_level: str = os.getenv("CATALOG_LOG_LEVEL", "INFO")

    # When enabled, add/update reject bodies that are not valid JSON objects
    # or carry fields of the wrong type with a 400 instead of falling back
    # to zero values.
    strict_bodies: bool = _env_bool("CATALOG_STRICT_BODIES")

    cors_origins: List[str] = field(default_factory=lambda: _env_list("CATALOG_CORS_ORIGINS", "*"))


settings = Settings()
