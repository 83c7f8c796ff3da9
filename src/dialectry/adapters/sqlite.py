"""
SQLite driver handle wrapping the Python stdlib sqlite3 module.
"""

from __future__ import annotations

import sqlite3
from typing import Any

from ..connections.base import ConnectionMetadata, split_version
from .base import DBAPIDriver, parse_float


class SQLiteDriver(DBAPIDriver):
    identifier = "sqlite3"
    url_schemes = ("sqlite",)

    def __init__(self) -> None:
        super().__init__(sqlite3)

    def _open(self, url: str, options: dict[str, Any]) -> sqlite3.Connection:
        path = self._normalize_path(url)
        timeout = parse_float(options.get("timeout", 5.0), key="timeout")
        connection = sqlite3.connect(
            path,
            timeout=timeout,
            detect_types=sqlite3.PARSE_DECLTYPES,
            check_same_thread=False,
        )
        connection.execute("PRAGMA foreign_keys = ON")
        return connection

    def describe(self, connection: sqlite3.Connection) -> ConnectionMetadata:
        version = sqlite3.sqlite_version
        major, minor = split_version(version)
        return ConnectionMetadata(
            product_name="SQLite",
            product_version=version,
            major_version=major,
            minor_version=minor,
            catalog="main",
        )

    def get_autocommit(self, connection: sqlite3.Connection) -> bool:
        return connection.isolation_level is None

    def set_autocommit(self, connection: sqlite3.Connection, value: bool) -> None:
        connection.isolation_level = None if value else ""

    def is_closed(self, connection: sqlite3.Connection) -> bool:
        try:
            connection.total_changes
        except sqlite3.ProgrammingError:
            return True
        return False

    @staticmethod
    def _normalize_path(url: str) -> str:
        _, sep, rest = url.partition("://")
        if not sep:
            rest = url.split(":", 1)[1]
        elif rest.startswith("/"):
            rest = rest[1:]
        return rest or ":memory:"
