"""
Configuration loaded from environment variables.

Call ``load_settings()`` after the environment is prepared; every field has a
default so the service runs with no configuration at all.
"""
import os
from dataclasses import dataclass, field
from typing import List


def _split_csv(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


@dataclass
class Settings:
    """Application settings."""

    project_name: str = "crudstore"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])


def load_settings() -> Settings:
    """Build ``Settings`` from the current environment."""
    return Settings(
        project_name=os.getenv("PROJECT_NAME", "crudstore"),
        host=os.getenv("CRUDSTORE_HOST", "0.0.0.0"),
        port=int(os.getenv("CRUDSTORE_PORT", "8080")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        api_prefix=os.getenv("API_PREFIX", "/api/v1").rstrip("/"),
        cors_allow_origins=_split_csv(os.getenv("CORS_ALLOW_ORIGINS", "*")) or ["*"],
    )
