from __future__ import annotations

import logging
import signal
import subprocess
from typing import Callable, Dict, Optional

from libs.core.exceptions import DaemonError
from libs.core.settings import Settings, get_settings


logger = logging.getLogger(__name__)

HANDLED_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class DaemonRunner:
    """Launch the Firebird guardian in the foreground and wait on it.

    SIGINT (Ctrl-C in interactive mode) and SIGTERM (polite shutdown from the
    container runtime) are logged and passed on to the guardian, which stops
    the server it supervises.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        popen: Callable[..., subprocess.Popen] = subprocess.Popen,
        run: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ) -> None:
        self.settings = settings or get_settings()
        self._popen = popen
        self._run = run
        self.process: Optional[subprocess.Popen] = None

    # ------------------------------------------------------------------
    def version(self) -> str:
        """Return the server's version banner (``fb_smp_server -z``)."""

        try:
            proc = self._run(
                [str(self.settings.firebird_server), "-z"],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            logger.warning("Cannot query server version: %s", exc)
            return "Firebird"
        return (proc.stdout or proc.stderr).strip() or "Firebird"

    def handle_signal(self, signum: int, frame=None) -> None:
        logger.info(
            "Stopping Firebird... [%s received]", signal.Signals(signum).name
        )
        if self.process is not None and self.process.poll() is None:
            self.process.send_signal(signum)

    def start(self) -> subprocess.Popen:
        guardian = str(self.settings.firebird_guardian)
        try:
            self.process = self._popen([guardian])
        except OSError as exc:
            raise DaemonError(f"Cannot start {guardian}.", str(exc)) from exc
        return self.process

    def run_and_wait(self) -> int:
        """Start the guardian, block until it exits and return its status."""

        previous: Dict[int, object] = {}
        for signum in HANDLED_SIGNALS:
            previous[signum] = signal.signal(signum, self.handle_signal)
        try:
            logger.info("Starting %s", self.version())
            returncode = self.start().wait()
        finally:
            for signum, handler in previous.items():
                signal.signal(signum, handler)

        if returncode < 0:
            # Killed by a signal: report it the way a shell would
            returncode = 128 - returncode
        logger.info("Firebird exited", extra={"returncode": returncode})
        return returncode


__all__ = ["DaemonRunner", "HANDLED_SIGNALS"]
