"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from typing import ClassVar

from .base import PRIORITY_DATABASE, Dialect, DialectCapabilities


class PostgresDialect(Dialect):
    """
    PostgreSQL dialect using percent positional parameters.
    """

    short_name: ClassVar[str] = "postgresql"
    product_name: ClassVar[str | None] = "PostgreSQL"
    priority: ClassVar[int] = PRIORITY_DATABASE
    url_schemes: ClassVar[tuple[str, ...]] = ("postgresql", "postgres")
    default_driver_name: ClassVar[str | None] = "psycopg"
    param_style: ClassVar[str] = "pyformat"
    capabilities: ClassVar[DialectCapabilities] = DialectCapabilities(
        supports_returning=True,
        supports_savepoints=True,
        supports_partial_indexes=True,
        supports_schema_namespaces=True,
        supports_sequences=True,
    )

    def escape_object_name(self, name: str) -> str:
        # Unquoted names are folded to lower case by the server.
        if name != name.lower():
            return self.quote_identifier(name)
        return super().escape_object_name(name)
