from __future__ import annotations

import logging
from typing import Dict, List

from libs.core.models import StartupOptions
from libs.firebird.conf import FirebirdConf, indent


logger = logging.getLogger(__name__)


def legacy_auth_settings(major: int) -> Dict[str, str]:
    """``firebird.conf`` changes that put Legacy_Auth first.

    Firebird 4+ lists ``Srp256`` before ``Srp``. WireCrypt defaults to
    ``Required``, which legacy clients cannot satisfy.
    """

    srp256 = "Srp256, " if major >= 4 else ""
    return {
        "AuthServer": f"Legacy_Auth, {srp256}Srp",
        "AuthClient": f"Legacy_Auth, {srp256}Srp",
        "UserManager": "Legacy_UserManager, Srp",
        "WireCrypt": "Enabled",
    }


class ConfigureServer:
    """Apply environment-driven settings to ``firebird.conf``."""

    def __init__(self, conf: FirebirdConf, major: int) -> None:
        self.conf = conf
        self.major = major

    def __call__(self, options: StartupOptions) -> List[str]:
        if options.use_legacy_auth:
            logger.info("Using Legacy_Auth.")
            if self.major >= 3:
                for key, value in legacy_auth_settings(self.major).items():
                    self.conf.set(key, value)
            else:
                logger.info(
                    "Firebird %d only supports Legacy_Auth; firebird.conf left as is.",
                    self.major,
                )

        for key, value in options.conf_overrides.items():
            self.conf.set(key, value)

        changed = self.conf.active_settings()
        if changed:
            logger.info("Using settings:\n%s", indent(changed))
        return changed


__all__ = ["ConfigureServer", "legacy_auth_settings"]
