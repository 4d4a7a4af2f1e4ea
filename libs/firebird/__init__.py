"""Wrappers around the installed Firebird server and its tools."""

from .conf import FirebirdConf, indent
from .daemon import DaemonRunner
from .isql import IsqlClient
from . import statements

__all__ = ["FirebirdConf", "indent", "DaemonRunner", "IsqlClient", "statements"]
