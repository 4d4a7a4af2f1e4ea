"""Core library exposing settings, exceptions and startup options."""

from .settings import Settings, get_settings
from .exceptions import (
    EntrypointError,
    SecretConflictError,
    SecretFileError,
    MissingVariableError,
    InvalidIdentifierError,
    IsqlError,
    DaemonError,
)
from .models import StartupOptions

__all__ = [
    "Settings",
    "get_settings",
    "EntrypointError",
    "SecretConflictError",
    "SecretFileError",
    "MissingVariableError",
    "InvalidIdentifierError",
    "IsqlError",
    "DaemonError",
    "StartupOptions",
]
