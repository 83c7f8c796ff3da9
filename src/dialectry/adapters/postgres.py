"""
PostgreSQL driver handle wrapping psycopg.
"""

from __future__ import annotations

from typing import Any

from ..connections.base import ConnectionMetadata, split_version
from ..errors import DriverNotFoundError
from ..security.dsns import redact_url
from .base import DBAPIDriver, query_one


def _load_driver():
    try:
        import psycopg

        return psycopg
    except ImportError:
        return None


class PostgresDriver(DBAPIDriver):
    identifier = "psycopg"
    url_schemes = ("postgresql", "postgres")

    def __init__(self) -> None:
        driver = _load_driver()
        if driver is None:
            raise DriverNotFoundError(self.identifier, "psycopg is required to connect to PostgreSQL.")
        super().__init__(driver)

    def _open(self, url: str, options: dict[str, Any]) -> Any:
        # libpq only understands the bare scheme.
        _, _, rest = url.partition("://")
        return self.module.connect(f"postgresql://{rest}", **options)

    def describe(self, connection: Any) -> ConnectionMetadata:
        version, user, database = query_one(
            connection,
            "SELECT current_setting('server_version'), current_user, current_database()",
        )
        major, minor = split_version(version)
        dsn = getattr(getattr(connection, "info", None), "dsn", None)
        return ConnectionMetadata(
            product_name="PostgreSQL",
            product_version=version,
            major_version=major,
            minor_version=minor,
            url=redact_url(dsn) if dsn else None,
            user_name=user,
            catalog=database,
        )

    def sql_keywords(self, connection: Any) -> list[str]:
        cursor = connection.cursor()
        try:
            cursor.execute("SELECT word FROM pg_get_keywords() WHERE catcode IN ('R', 'T')")
            return [row[0] for row in cursor.fetchall()]
        except Exception:
            # A failed statement aborts the open transaction; leave it usable.
            if not self.get_autocommit(connection):
                connection.rollback()
            raise
        finally:
            cursor.close()
