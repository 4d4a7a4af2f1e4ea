from __future__ import annotations

import os
from typing import Dict, MutableMapping, Optional

from libs.core.models import StartupOptions
from .secrets import read_from_file_or_env

CONF_PREFIX = "FIREBIRD_CONF_"


def conf_overrides(environ: MutableMapping[str, str]) -> Dict[str, str]:
    """Map ``FIREBIRD_CONF_<Key>`` variables to ``{Key: value}`` in name order."""

    overrides: Dict[str, str] = {}
    for name in sorted(environ):
        if name.startswith(CONF_PREFIX) and len(name) > len(CONF_PREFIX):
            overrides[name[len(CONF_PREFIX):]] = environ[name]
    return overrides


def load_startup_options(
    environ: Optional[MutableMapping[str, str]] = None,
) -> StartupOptions:
    """Resolve every user-facing variable, failing fast on conflicts."""

    env = os.environ if environ is None else environ
    legacy = read_from_file_or_env("FIREBIRD_USE_LEGACY_AUTH", environ=env)
    return StartupOptions(
        use_legacy_auth=legacy == "true",
        root_password=read_from_file_or_env("FIREBIRD_ROOT_PASSWORD", environ=env),
        user=read_from_file_or_env("FIREBIRD_USER", environ=env),
        password=read_from_file_or_env("FIREBIRD_PASSWORD", environ=env),
        conf_overrides=conf_overrides(env),
    )


__all__ = ["CONF_PREFIX", "conf_overrides", "load_startup_options"]
