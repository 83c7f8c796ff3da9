"""
MySQL and MariaDB dialect implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from .base import PRIORITY_DATABASE, Dialect, DialectCapabilities

if TYPE_CHECKING:
    from ..connections.base import DatabaseConnection


class MySQLDialect(Dialect):
    """
    MySQL dialect using percent-style placeholders.
    """

    short_name: ClassVar[str] = "mysql"
    product_name: ClassVar[str | None] = "MySQL"
    priority: ClassVar[int] = PRIORITY_DATABASE
    url_schemes: ClassVar[tuple[str, ...]] = ("mysql",)
    default_driver_name: ClassVar[str | None] = "pymysql"
    param_style: ClassVar[str] = "pyformat"
    quote_char: ClassVar[str] = "`"
    capabilities: ClassVar[DialectCapabilities] = DialectCapabilities(
        supports_returning=False,
        supports_savepoints=True,
        supports_partial_indexes=False,
        supports_schema_namespaces=True,
    )

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if limit is not None:
            parts.append(f"LIMIT {limit}")
        if offset is not None:
            if limit is None:
                parts.append("LIMIT 18446744073709551615")
            parts.append(f"OFFSET {offset}")
        return " ".join(parts)


class MariaDBDialect(MySQLDialect):
    """
    MariaDB speaks the MySQL protocol and reports itself as MySQL; the server
    version string is what tells them apart.
    """

    short_name: ClassVar[str] = "mariadb"
    priority: ClassVar[int] = PRIORITY_DATABASE + 1
    url_schemes: ClassVar[tuple[str, ...]] = ("mariadb",)
    capabilities: ClassVar[DialectCapabilities] = DialectCapabilities(
        supports_returning=True,
        supports_savepoints=True,
        supports_partial_indexes=False,
        supports_schema_namespaces=True,
        supports_sequences=True,
    )

    def is_correct_implementation(self, connection: "DatabaseConnection") -> bool:
        if (connection.database_product_name or "").lower().startswith("mariadb"):
            return True
        return super().is_correct_implementation(connection) and "mariadb" in (
            connection.database_product_version or ""
        ).lower()
