"""
dialectry public package initialization.

Open a database endpoint and resolve the dialect that models it::

    from dialectry import open_database

    dialect = open_database("sqlite:///app.db")
    dialect.connection.commit()
"""

from .config import ConnectionSettings  # noqa: F401
from .connections import DatabaseConnection, DBAPIConnection, OfflineConnection  # noqa: F401
from .dialects import (
    Dialect,
    DialectRegistry,
    UnsupportedDialect,
    get_registry,
    reset_registry,
    set_registry,
)  # noqa: F401
from .errors import (
    ConfigurationError,
    ConnectionClosedError,
    DatabaseError,
    DriverNotFoundError,
    UnexpectedStateError,
)  # noqa: F401
from .factory import DatabaseFactory, open_connection, open_database  # noqa: F401

__all__ = [
    "ConfigurationError",
    "ConnectionClosedError",
    "ConnectionSettings",
    "DBAPIConnection",
    "DatabaseConnection",
    "DatabaseError",
    "DatabaseFactory",
    "Dialect",
    "DialectRegistry",
    "DriverNotFoundError",
    "OfflineConnection",
    "UnexpectedStateError",
    "UnsupportedDialect",
    "get_registry",
    "open_connection",
    "open_database",
    "reset_registry",
    "set_registry",
]
