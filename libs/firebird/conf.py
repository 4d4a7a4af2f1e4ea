from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List


logger = logging.getLogger(__name__)


class FirebirdConf:
    """Editor for ``firebird.conf`` style ``Key = Value`` files.

    Keys are matched literally at the start of a line. Commented defaults
    (``#Key = Value``) are uncommented before being rewritten, so setting a
    key that the stock file only documents makes it active. Keys that do not
    appear in the file at all are left alone.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    # ------------------------------------------------------------------
    # public API
    def set(self, key: str, value: str) -> bool:
        """Set ``key`` to ``value``; return False if the key is not present."""

        text = self.path.read_text(encoding="utf-8")
        k = re.escape(key)

        # Uncomment line
        text = re.sub(rf"^#({k}[ \t]*=)", r"\1", text, flags=re.MULTILINE)

        # Set KEY to VALUE, keeping the spacing around '='
        text, count = re.subn(
            rf"^({k}[ \t]*=[ \t]*).*$",
            lambda m: m.group(1) + value,
            text,
            flags=re.MULTILINE,
        )
        if not count:
            logger.warning(
                "Key not found in %s, skipped", self.path, extra={"key": key}
            )
            return False

        self.path.write_text(text, encoding="utf-8")
        return True

    def active_settings(self) -> List[str]:
        """Return non-comment content of every line that has any."""

        lines: List[str] = []
        for line in self.path.read_text(encoding="utf-8").splitlines():
            content = line.split("#", 1)[0].strip()
            if content:
                lines.append(content)
        return lines


def indent(lines: List[str], prefix: str = "    ") -> str:
    return "\n".join(f"{prefix}{line}" for line in lines)


__all__ = ["FirebirdConf", "indent"]
