"""Runtime configuration for the UCD version publisher."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration values mapped from environment variables.

    Every field is read from the upper-cased variable of the same name,
    e.g. ``ucd_url`` from ``UCD_URL``.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field("UCD Version Publisher")
    app_version: str = Field("1.0.0")
    log_level: str = Field("INFO")

    # UrbanCode Deploy server
    ucd_url: str = Field("https://localhost:8443")
    ucd_username: Optional[str] = Field(None)
    ucd_password: Optional[str] = Field(None)
    ucd_verify_ssl: bool = Field(True)
    ucd_timeout: float = Field(60.0)
    ucd_default_link_name: str = Field("Build Link")

    # Where `<component>_VersionId` is recorded: "memory" or "mysql"
    env_store: str = Field("memory")

    # Shared database configuration (used by the mysql env store)
    db_host: str = Field("127.0.0.1")
    db_port: int = Field(3306)
    db_name: str = Field("ucdpublisher")
    db_user: str = Field("ucdpublisher")
    db_password: str = Field("")
    db_charset: str = Field("utf8mb4")
    database_url: Optional[str] = Field(None)


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()
