from __future__ import annotations

import os
from pathlib import Path
from typing import MutableMapping, Optional

from libs.core.exceptions import SecretConflictError, SecretFileError

FILE_SUFFIX = "_FILE"


def read_from_file_or_env(
    var: str,
    default: str = "",
    environ: Optional[MutableMapping[str, str]] = None,
) -> str:
    """Resolve ``var`` from the environment or from the file in ``var_FILE``.

    A non-empty ``var`` wins, then the contents of the file named by
    ``var_FILE``, then ``default``. Setting both is an error. The resolved
    value is written back to ``var`` and ``var_FILE`` is removed, so later
    steps (and the exec'd server) only ever see the plain variable.
    """

    env = os.environ if environ is None else environ
    file_var = f"{var}{FILE_SUFFIX}"
    if env.get(var) and env.get(file_var):
        raise SecretConflictError(var)

    value = default
    if env.get(var):
        value = env[var]
    elif env.get(file_var):
        path = Path(env[file_var])
        try:
            # Same as shell `$(< file)`: trailing newlines are dropped
            value = path.read_text(encoding="utf-8").rstrip("\n")
        except OSError as exc:
            raise SecretFileError(
                f"Cannot read {file_var} ({path}).", str(exc)
            ) from exc

    env[var] = value
    env.pop(file_var, None)
    return value


__all__ = ["read_from_file_or_env", "FILE_SUFFIX"]
