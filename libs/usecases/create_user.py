from __future__ import annotations

import logging

from libs.core.exceptions import IsqlError, MissingVariableError
from libs.core.models import StartupOptions
from libs.firebird import statements
from libs.firebird.isql import IsqlClient


logger = logging.getLogger(__name__)


class CreateUser:
    """Create (or reset) the admin user named by FIREBIRD_USER."""

    def __init__(self, isql: IsqlClient, major: int) -> None:
        self.isql = isql
        self.major = major

    def __call__(self, options: StartupOptions) -> bool:
        if not options.user:
            return False
        if not options.password:
            raise MissingVariableError("FIREBIRD_PASSWORD", required_by="FIREBIRD_USER")

        logger.info("Creating user '%s'...", options.user)
        if self.major >= 3:
            self.isql.execute(
                statements.create_or_alter_admin(options.user, options.password)
            )
            return True

        # No CREATE OR ALTER USER before Firebird 3
        try:
            self.isql.execute(statements.create_admin(options.user, options.password))
        except IsqlError:
            logger.info("User '%s' already exists, updating it.", options.user)
            self.isql.execute(statements.alter_admin(options.user, options.password))
        return True


__all__ = ["CreateUser"]
