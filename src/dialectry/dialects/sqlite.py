"""
SQLite dialect implementation.
"""

from __future__ import annotations

from typing import ClassVar

from .base import PRIORITY_DATABASE, Dialect, DialectCapabilities


class SQLiteDialect(Dialect):
    """
    SQLite dialect using qmark param style and minimal capabilities.
    """

    short_name: ClassVar[str] = "sqlite"
    product_name: ClassVar[str | None] = "SQLite"
    priority: ClassVar[int] = PRIORITY_DATABASE
    url_schemes: ClassVar[tuple[str, ...]] = ("sqlite",)
    default_driver_name: ClassVar[str | None] = "sqlite3"
    param_style: ClassVar[str] = "qmark"
    capabilities: ClassVar[DialectCapabilities] = DialectCapabilities(
        supports_returning=False,
        supports_savepoints=True,
        supports_partial_indexes=False,
        supports_schema_namespaces=False,
    )

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if limit is not None:
            parts.append(f"LIMIT {limit}")
        if offset is not None:
            if limit is None:
                parts.append("LIMIT -1")
            parts.append(f"OFFSET {offset}")
        return " ".join(parts)
