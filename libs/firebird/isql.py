from __future__ import annotations

import logging
import os
import subprocess
from typing import Dict, List, Optional

from libs.core.exceptions import IsqlError
from libs.core.settings import Settings, get_settings


class IsqlClient:
    """Run SQL scripts through Firebird's ``isql`` command-line client.

    Scripts are fed on stdin with ``-b`` (bail on first error) so a failing
    statement makes ``isql`` exit non-zero. Scripts may contain passwords and
    are never logged.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.logger = logging.getLogger(__name__)

    def command(self, database: str, user: Optional[str] = None) -> List[str]:
        cmd = [str(self.settings.firebird_isql), "-b"]
        if user:
            cmd += ["-user", user]
        cmd.append(database)
        return cmd

    def execute(
        self,
        script: str,
        database: Optional[str] = None,
        user: Optional[str] = "SYSDBA",
    ) -> str:
        """Run ``script`` against ``database`` and return isql's output."""

        database = database or self.settings.firebird_security_db
        cmd = self.command(database, user)
        env: Dict[str, str] = dict(os.environ)
        if user:
            env.setdefault("ISC_USER", user)

        self.logger.debug("Running isql", extra={"database": database, "user": user})
        try:
            proc = subprocess.run(
                cmd,
                input=script,
                capture_output=True,
                text=True,
                env=env,
                check=False,
            )
        except OSError as exc:
            raise IsqlError(127, f"Cannot run {cmd[0]}: {exc}") from exc

        output = (proc.stdout or "") + (proc.stderr or "")
        if output.strip():
            self.logger.debug("isql output: %s", output.strip())
        if proc.returncode != 0:
            raise IsqlError(proc.returncode, output)
        return output


__all__ = ["IsqlClient"]
