"""Pydantic models describing the user-facing startup options."""

from __future__ import annotations

from typing import Dict

from pydantic import BaseModel, Field


class StartupOptions(BaseModel):
    """Options resolved once from the container environment."""

    use_legacy_auth: bool = Field(default=False, description="FIREBIRD_USE_LEGACY_AUTH")
    root_password: str = Field(default="", description="FIREBIRD_ROOT_PASSWORD")
    user: str = Field(default="", description="FIREBIRD_USER")
    password: str = Field(default="", description="FIREBIRD_PASSWORD")
    # firebird.conf key -> value, from FIREBIRD_CONF_<Key> variables
    conf_overrides: Dict[str, str] = Field(default_factory=dict)


__all__ = ["StartupOptions"]
