from __future__ import annotations

import logging
from pathlib import Path

from libs.core.models import StartupOptions
from libs.firebird import statements
from libs.firebird.isql import IsqlClient


logger = logging.getLogger(__name__)


class SetSysdbaPassword:
    """Change the SYSDBA password when FIREBIRD_ROOT_PASSWORD is set."""

    def __init__(self, isql: IsqlClient, major: int, password_file: Path) -> None:
        self.isql = isql
        self.major = major
        self.password_file = Path(password_file)

    def __call__(self, options: StartupOptions) -> bool:
        if not options.root_password:
            return False

        logger.info("Changing SYSDBA password.")
        self.isql.execute(statements.sysdba_password(options.root_password, self.major))
        if options.use_legacy_auth and self.major >= 3:
            self.isql.execute(
                statements.sysdba_password(
                    options.root_password, self.major, plugin="Legacy_UserManager"
                )
            )

        # The generated password stored by the package is stale now
        self.password_file.unlink(missing_ok=True)
        return True


__all__ = ["SetSysdbaPassword"]
