"""
Built-in driver catalog.
"""

from __future__ import annotations

from .base import DriverCatalog
from .mysql import MySQLDriver
from .oracle import OracleDriver
from .postgres import PostgresDriver
from .sqlite import SQLiteDriver


def build_default_catalog() -> DriverCatalog:
    """
    Catalog of the drivers dialectry knows out of the box. Drivers are imported
    when resolved, so missing optional packages only fail for the URLs that need them.
    """

    return DriverCatalog(
        {
            "sqlite3": SQLiteDriver,
            "psycopg": PostgresDriver,
            "pymysql": MySQLDriver,
            "mysqldb": lambda: MySQLDriver("mysqldb"),
            "oracledb": OracleDriver,
        }
    )
