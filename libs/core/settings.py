"""Entrypoint settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the container entrypoint.

    Defaults match the paths of the ``firebird2.5-superclassic`` package
    installed by the image. Names deliberately avoid the ``FIREBIRD_CONF_``
    prefix, which is reserved for ``firebird.conf`` overrides.
    """

    firebird_major: int = Field(default=2)
    firebird_data: Path = Field(default=Path("/data"))
    firebird_port: int = Field(default=3050)
    firebird_config_file: Path = Field(default=Path("/etc/firebird/2.5/firebird.conf"))
    firebird_isql: Path = Field(default=Path("/usr/bin/isql-fb"))
    firebird_server: Path = Field(default=Path("/usr/sbin/fb_smp_server"))
    firebird_guardian: Path = Field(default=Path("/usr/sbin/fbguard"))
    firebird_security_db: str = Field(
        default="/var/lib/firebird/2.5/system/security2.fdb"
    )
    firebird_sysdba_password_path: Path = Field(
        default=Path("/etc/firebird/2.5/SYSDBA.password")
    )
    # Seconds to wait for the server port in the container health check
    health_timeout: float = Field(default=3.0)
    service_name: str = Field(default="firebird")
    environment: str = Field(default="production")
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        # The container environment carries plenty of unrelated variables
        # (FIREBIRD_USER, FIREBIRD_CONF_*, PATH, ...).
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return application settings instance."""
    return Settings()


__all__ = ["Settings", "get_settings"]
