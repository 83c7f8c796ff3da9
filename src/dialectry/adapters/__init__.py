"""
Driver handles and the catalog that loads them by identifier.
"""

from .base import DBAPIDriver, DriverCatalog, DriverHandle
from .catalog import build_default_catalog
from .mysql import MySQLDriver
from .oracle import OracleDriver
from .postgres import PostgresDriver
from .sqlite import SQLiteDriver

__all__ = [
    "DBAPIDriver",
    "DriverCatalog",
    "DriverHandle",
    "MySQLDriver",
    "OracleDriver",
    "PostgresDriver",
    "SQLiteDriver",
    "build_default_catalog",
]
