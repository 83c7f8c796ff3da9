"""
Connection handle delegating to a native DB-API 2.0 connection.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Sequence

from ..errors import ConnectionClosedError
from ..security.dsns import redact_url
from ..utils import get_logger, time_call
from .base import ConnectionMetadata

if TYPE_CHECKING:
    from ..adapters.base import DriverHandle
    from ..dialects.base import Dialect


class PreparedStatement:
    """
    SQL text bound to a connection, executed with different parameters.
    """

    def __init__(self, connection: "DBAPIConnection", sql: str) -> None:
        self.connection = connection
        self.sql = sql

    def execute(self, params: Sequence[Any] | None = None) -> Any:
        return self.connection.execute(self.sql, params)

    def executemany(self, seq_of_params: Iterable[Sequence[Any]]) -> Any:
        return self.connection.executemany(self.sql, seq_of_params)


class DBAPIConnection:
    """
    Wraps exactly one native connection. Two handles are equal when they wrap
    the same native connection object.
    """

    def __init__(self, native: Any, driver: "DriverHandle", *, url: str | None = None) -> None:
        self._native = native
        self._driver = driver
        self._url = url
        self._closed = False
        self._metadata: ConnectionMetadata | None = None
        self.logger = get_logger("connections.dbapi")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DBAPIConnection) and other._native is self._native

    def __hash__(self) -> int:
        return id(self._native)

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<DBAPIConnection {self.url} via {self._driver.identifier} ({state})>"

    def __enter__(self) -> "DBAPIConnection":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def wrapped_connection(self) -> Any:
        return self._native

    @property
    def driver(self) -> "DriverHandle":
        return self._driver

    # ------------------------------------------------------------------ #
    # Metadata
    # ------------------------------------------------------------------ #
    @property
    def metadata(self) -> ConnectionMetadata:
        self._ensure_open()
        if self._metadata is None:
            self._metadata = self._driver.describe(self._native)
        return self._metadata

    @property
    def database_product_name(self) -> str:
        return self.metadata.product_name

    @property
    def database_product_version(self) -> str:
        return self.metadata.product_version

    @property
    def database_major_version(self) -> int:
        return self.metadata.major_version

    @property
    def database_minor_version(self) -> int:
        return self.metadata.minor_version

    @property
    def url(self) -> str:
        """
        Connection URL with credentials redacted.
        """

        if self._url:
            return redact_url(self._url)
        if self._metadata is not None and self._metadata.url:
            return self._metadata.url
        return ""

    @property
    def connection_user_name(self) -> str | None:
        return self.metadata.user_name

    @property
    def catalog(self) -> str | None:
        return self.metadata.catalog

    def attached(self, dialect: "Dialect") -> None:
        try:
            words = self._driver.sql_keywords(self._native)
        except Exception as exc:
            self.logger.info("Error fetching reserved words list from %s driver: %s", self._driver.identifier, exc)
            return
        dialect.add_reserved_words(words)

    # ------------------------------------------------------------------ #
    # Transactions
    # ------------------------------------------------------------------ #
    @property
    def autocommit(self) -> bool:
        self._ensure_open()
        return self._driver.get_autocommit(self._native)

    @autocommit.setter
    def autocommit(self, value: bool) -> None:
        self._ensure_open()
        self._driver.set_autocommit(self._native, bool(value))

    @property
    def is_closed(self) -> bool:
        return self._closed or self._driver.is_closed(self._native)

    def commit(self) -> None:
        self._ensure_open()
        if not self._driver.get_autocommit(self._native):
            self._native.commit()

    def rollback(self) -> None:
        self._ensure_open()
        if self._driver.is_closed(self._native):
            return
        if not self._driver.get_autocommit(self._native):
            self._native.rollback()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._driver.is_closed(self._native):
            return
        try:
            if not self._driver.get_autocommit(self._native):
                self._native.rollback()
        finally:
            self._native.close()
            self.logger.debug("Closed connection to %s", self.url)

    # ------------------------------------------------------------------ #
    # Statements
    # ------------------------------------------------------------------ #
    def create_statement(self) -> Any:
        self._ensure_open()
        return self._native.cursor()

    def prepare_statement(self, sql: str) -> PreparedStatement:
        self._ensure_open()
        return PreparedStatement(self, sql)

    def execute(self, sql: str, params: Sequence[Any] | None = None) -> Any:
        cursor = self.create_statement()
        with time_call(f"{self._driver.identifier}.execute", self.logger, target=sql):
            cursor.execute(sql, tuple(params or ()))
        return cursor

    def executemany(self, sql: str, seq_of_params: Iterable[Sequence[Any]]) -> Any:
        cursor = self.create_statement()
        with time_call(f"{self._driver.identifier}.executemany", self.logger, target=sql):
            cursor.executemany(sql, [tuple(params) for params in seq_of_params])
        return cursor

    def native_sql(self, sql: str) -> str:
        self._ensure_open()
        return sql

    def _ensure_open(self) -> None:
        if self._closed:
            raise ConnectionClosedError(f"Connection to {self.url} is closed.")
