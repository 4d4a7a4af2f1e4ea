from __future__ import annotations

import socket
import sys

from libs.core.settings import get_settings


def main() -> None:
    settings = get_settings()
    try:
        with socket.create_connection(
            ("127.0.0.1", settings.firebird_port), timeout=settings.health_timeout
        ):
            sys.exit(0)
    except OSError as exc:
        print(exc, file=sys.stderr)

    sys.exit(1)


if __name__ == "__main__":
    main()
