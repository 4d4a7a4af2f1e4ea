"""Errors that abort container startup."""

from __future__ import annotations


class EntrypointError(Exception):
    """Base class for fatal startup errors.

    ``title`` and ``detail`` are rendered as the framed banner printed to
    stderr before the entrypoint exits non-zero.
    """

    def __init__(self, title: str, detail: str = "") -> None:
        super().__init__(title)
        self.title = title
        self.detail = detail

    def banner(self) -> str:
        lines = ["-----", f"ERROR: {self.title}"]
        if self.detail:
            lines.append("")
            lines.extend(f"       {line}" for line in self.detail.splitlines())
        lines.append("-----")
        return "\n".join(lines)


class SecretConflictError(EntrypointError):
    """Raised when a variable and its ``_FILE`` twin are both set."""

    def __init__(self, var: str) -> None:
        file_var = f"{var}_FILE"
        super().__init__(
            f"Both {var} and {file_var} are set.",
            f"Variables {var} and {file_var} are mutually exclusive. Remove either one.",
        )
        self.var = var


class SecretFileError(EntrypointError):
    """Raised when the file named by a ``_FILE`` variable cannot be read."""


class MissingVariableError(EntrypointError):
    """Raised when a variable required by another one is not set."""

    def __init__(self, var: str, required_by: str) -> None:
        super().__init__(
            f"{var} variable is not set.",
            f"When using {required_by} you must also set {var} variable.",
        )
        self.var = var
        self.required_by = required_by


class InvalidIdentifierError(EntrypointError):
    """Raised when a user name cannot be used as a plain SQL identifier."""


class IsqlError(EntrypointError):
    """Raised when ``isql`` exits with a non-zero status."""

    def __init__(self, returncode: int, output: str = "") -> None:
        super().__init__(f"isql exited with status {returncode}.", output.strip())
        self.returncode = returncode
        self.output = output


class DaemonError(EntrypointError):
    """Raised when the server guardian cannot be started."""


__all__ = [
    "EntrypointError",
    "SecretConflictError",
    "SecretFileError",
    "MissingVariableError",
    "InvalidIdentifierError",
    "IsqlError",
    "DaemonError",
]
