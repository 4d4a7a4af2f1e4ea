"""SQL for Firebird user management.

Firebird 3 introduced ``CREATE OR ALTER USER`` and authentication plugins
(``USING PLUGIN``). On 2.5 only ``CREATE USER`` / ``ALTER USER`` against the
legacy security database exist.
"""

from __future__ import annotations

import re

from libs.core.exceptions import InvalidIdentifierError

MAX_IDENTIFIER_LEN = 31
_IDENTIFIER_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_$]*$")


def quote_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def check_identifier(name: str) -> str:
    if not _IDENTIFIER_RE.match(name) or len(name) > MAX_IDENTIFIER_LEN:
        raise InvalidIdentifierError(
            f"'{name}' is not a valid Firebird user name.",
            "Use letters, digits, '_' or '$', starting with a letter "
            f"(at most {MAX_IDENTIFIER_LEN} characters).",
        )
    return name


def _script(statement: str) -> str:
    return f"{statement}\nEXIT;\n"


def sysdba_password(password: str, major: int, plugin: str = "Srp") -> str:
    if major >= 3:
        return _script(
            f"CREATE OR ALTER USER SYSDBA\n"
            f"    PASSWORD {quote_literal(password)}\n"
            f"    USING PLUGIN {plugin};"
        )
    return _script(f"ALTER USER SYSDBA\n    PASSWORD {quote_literal(password)};")


def create_or_alter_admin(user: str, password: str) -> str:
    """Firebird 3+: create ``user`` or reset its password, as an admin."""

    return _script(
        f"CREATE OR ALTER USER {check_identifier(user)}\n"
        f"    PASSWORD {quote_literal(password)}\n"
        f"    GRANT ADMIN ROLE;"
    )


def create_admin(user: str, password: str) -> str:
    return _script(
        f"CREATE USER {check_identifier(user)}\n"
        f"    PASSWORD {quote_literal(password)}\n"
        f"    GRANT ADMIN ROLE;"
    )


def alter_admin(user: str, password: str) -> str:
    return _script(
        f"ALTER USER {check_identifier(user)}\n"
        f"    PASSWORD {quote_literal(password)}\n"
        f"    GRANT ADMIN ROLE;"
    )


__all__ = [
    "MAX_IDENTIFIER_LEN",
    "quote_literal",
    "check_identifier",
    "sysdba_password",
    "create_or_alter_admin",
    "create_admin",
    "alter_admin",
]
