"""Helpers for reading the container environment."""

from .secrets import read_from_file_or_env
from .options import CONF_PREFIX, conf_overrides, load_startup_options

__all__ = [
    "read_from_file_or_env",
    "CONF_PREFIX",
    "conf_overrides",
    "load_startup_options",
]
