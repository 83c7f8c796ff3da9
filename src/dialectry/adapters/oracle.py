"""
Oracle driver handle wrapping python-oracledb.
"""

from __future__ import annotations

from typing import Any

from ..connections.base import ConnectionMetadata, split_version
from ..errors import DriverNotFoundError
from ..security.dsns import parse_url
from .base import DBAPIDriver, query_one


def _load_driver():
    try:
        import oracledb  # type: ignore[import-untyped]

        return oracledb
    except ImportError:
        return None


class OracleDriver(DBAPIDriver):
    identifier = "oracledb"
    url_schemes = ("oracle",)

    def __init__(self) -> None:
        driver = _load_driver()
        if driver is None:
            raise DriverNotFoundError(self.identifier, "oracledb is required to connect to Oracle.")
        super().__init__(driver)

    def _open(self, url: str, options: dict[str, Any]) -> Any:
        parsed = parse_url(url)
        dsn = f"{parsed.host or 'localhost'}:{parsed.port or 1521}/{parsed.database or ''}"
        connect_kwargs: dict[str, Any] = {
            "user": parsed.username,
            "password": parsed.password,
            "dsn": dsn,
        }
        connect_kwargs.update(options)
        return self.module.connect(**connect_kwargs)

    def describe(self, connection: Any) -> ConnectionMetadata:
        version = connection.version
        (schema,) = query_one(connection, "SELECT SYS_CONTEXT('USERENV', 'CURRENT_SCHEMA') FROM DUAL")
        major, minor = split_version(version)
        return ConnectionMetadata(
            product_name="Oracle",
            product_version=version,
            major_version=major,
            minor_version=minor,
            user_name=connection.username,
            catalog=schema,
        )

    def sql_keywords(self, connection: Any) -> list[str]:
        cursor = connection.cursor()
        try:
            cursor.execute("SELECT keyword FROM v$reserved_words WHERE reserved = 'Y'")
            return [row[0] for row in cursor.fetchall()]
        finally:
            cursor.close()

    def is_closed(self, connection: Any) -> bool:
        # Property access on a closed connection raises DPY-1001; an unhealthy one is still open.
        try:
            connection.autocommit
        except self.module.InterfaceError:
            return True
        return False
