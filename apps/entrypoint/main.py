"""Docker entrypoint for the Firebird image.

``firebird`` (the image CMD) configures the server from environment
variables, optionally provisions SYSDBA and an admin user, then runs the
guardian in the foreground. Any other command is exec'd as given, e.g.
``docker run --rm -it image bash``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import List, MutableMapping, Optional

from libs.core.exceptions import EntrypointError
from libs.core.settings import Settings, get_settings
from libs.env.options import load_startup_options
from libs.firebird import DaemonRunner, FirebirdConf, IsqlClient
from libs.logging import setup_logging
from libs.usecases import ConfigureServer, CreateUser, SetSysdbaPassword

DEFAULT_COMMAND = ["firebird"]

logger = logging.getLogger("entrypoint")


def start_firebird(
    settings: Settings,
    environ: Optional[MutableMapping[str, str]] = None,
    runner: Optional[DaemonRunner] = None,
) -> int:
    """Run every startup step, then the server; return its exit status."""

    options = load_startup_options(environ)
    major = settings.firebird_major

    if settings.firebird_data.is_dir():
        logger.info("Data directory: %s", settings.firebird_data)
    else:
        logger.warning("Data directory %s does not exist", settings.firebird_data)

    isql = IsqlClient(settings)
    ConfigureServer(FirebirdConf(settings.firebird_config_file), major)(options)
    SetSysdbaPassword(isql, major, settings.firebird_sysdba_password_path)(options)
    CreateUser(isql, major)(options)

    runner = runner or DaemonRunner(settings)
    return runner.run_and_wait()


def exec_command(args: List[str]) -> int:
    """Replace this process with ``args``; return a shell-style status on failure."""

    try:
        os.execvp(args[0], args)
    except PermissionError as exc:
        print(f"{args[0]}: {exc.strerror}", file=sys.stderr)
        return 126
    except OSError as exc:
        print(f"{args[0]}: {exc.strerror}", file=sys.stderr)
        return 127
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv) or DEFAULT_COMMAND
    if args[0] != "firebird":
        return exec_command(args)

    setup_logging()
    settings = get_settings()
    try:
        return start_firebird(settings)
    except EntrypointError as exc:
        print(exc.banner(), file=sys.stderr)
        logger.error("Startup failed: %s", exc.title)
        return 1


if __name__ == "__main__":
    sys.exit(main())
