"""
MySQL/MariaDB driver handle wrapping PyMySQL or mysqlclient.
"""

from __future__ import annotations

from typing import Any

from ..connections.base import ConnectionMetadata, split_version
from ..errors import DriverNotFoundError
from ..security.dsns import parse_url
from .base import DBAPIDriver, coerce_options, pop_bool, query_one


def _load_driver(identifier: str = "pymysql"):
    try:
        if identifier == "mysqldb":
            import MySQLdb

            return MySQLdb
        import pymysql  # type: ignore[import-untyped]

        return pymysql
    except ImportError:
        return None


class MySQLDriver(DBAPIDriver):
    url_schemes = ("mysql", "mariadb")

    def __init__(self, identifier: str = "pymysql") -> None:
        self.identifier = identifier
        driver = _load_driver(identifier)
        if driver is None:
            raise DriverNotFoundError(
                identifier, f"{identifier} is required to connect to MySQL or MariaDB."
            )
        super().__init__(driver)

    def _open(self, url: str, options: dict[str, Any]) -> Any:
        parsed = parse_url(url)
        connect_kwargs: dict[str, Any] = {
            "host": parsed.host or "localhost",
            "user": parsed.username,
            "password": parsed.password,
            "database": parsed.database,
        }
        if parsed.port:
            connect_kwargs["port"] = parsed.port
        query = dict(parsed.query)
        autocommit = pop_bool(query, "autocommit")
        connect_kwargs.update(coerce_options(query))
        connect_kwargs.update(options)
        connection = self.module.connect(**connect_kwargs)
        if autocommit is not None:
            self.set_autocommit(connection, autocommit)
        return connection

    def describe(self, connection: Any) -> ConnectionMetadata:
        version, user, database = query_one(connection, "SELECT VERSION(), CURRENT_USER(), DATABASE()")
        major, minor = split_version(version)
        return ConnectionMetadata(
            product_name="MySQL",
            product_version=version,
            major_version=major,
            minor_version=minor,
            user_name=user,
            catalog=database,
        )

    def sql_keywords(self, connection: Any) -> list[str]:
        cursor = connection.cursor()
        try:
            cursor.execute("SELECT WORD FROM information_schema.KEYWORDS WHERE RESERVED = 1")
            return [row[0] for row in cursor.fetchall()]
        finally:
            cursor.close()

    def get_autocommit(self, connection: Any) -> bool:
        return bool(connection.get_autocommit())

    def set_autocommit(self, connection: Any, value: bool) -> None:
        # Both drivers expose autocommit as a method, not an attribute.
        connection.autocommit(value)

    def is_closed(self, connection: Any) -> bool:
        return not getattr(connection, "open", True)
