"""
Dialect descriptors and the registry that resolves them.
"""

from .base import (
    PRIORITY_DATABASE,
    PRIORITY_DEFAULT,
    PRIORITY_SPECIALIZED,
    Dialect,
    DialectCapabilities,
)
from .mock import MockDialect
from .mysql import MariaDBDialect, MySQLDialect
from .oracle import OracleDialect
from .postgres import PostgresDialect
from .registry import (
    DialectRegistry,
    get_registry,
    reset_registry,
    set_registry,
)
from .sqlite import SQLiteDialect
from .unsupported import UnsupportedDialect

__all__ = [
    "PRIORITY_DATABASE",
    "PRIORITY_DEFAULT",
    "PRIORITY_SPECIALIZED",
    "Dialect",
    "DialectCapabilities",
    "DialectRegistry",
    "MariaDBDialect",
    "MockDialect",
    "MySQLDialect",
    "OracleDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "UnsupportedDialect",
    "get_registry",
    "reset_registry",
    "set_registry",
]
