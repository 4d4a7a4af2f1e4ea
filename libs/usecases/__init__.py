"""Startup steps run before the server is launched."""

from .configure_server import ConfigureServer, legacy_auth_settings
from .set_sysdba import SetSysdbaPassword
from .create_user import CreateUser

__all__ = ["ConfigureServer", "legacy_auth_settings", "SetSysdbaPassword", "CreateUser"]
