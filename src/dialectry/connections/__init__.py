"""
Connection handles over live and simulated endpoints.
"""

from .base import ConnectionMetadata, DatabaseConnection
from .dbapi import DBAPIConnection, PreparedStatement
from .offline import OFFLINE_PREFIX, OfflineConnection, is_offline_url

__all__ = [
    "OFFLINE_PREFIX",
    "ConnectionMetadata",
    "DBAPIConnection",
    "DatabaseConnection",
    "OfflineConnection",
    "PreparedStatement",
    "is_offline_url",
]
