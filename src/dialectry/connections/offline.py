"""
Simulated connection for ``offline:`` URLs.

``offline:<short_name>[?param=value&...]`` declares the target dialect by
short name. Recognised parameters: ``version``, ``productName``, ``catalog``,
``user`` and ``reservedWords`` (comma separated, added to the bound dialect).
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import parse_qs

from ..errors import ConfigurationError, ConnectionClosedError
from .base import split_version

if TYPE_CHECKING:
    from ..dialects.base import Dialect

OFFLINE_PREFIX = "offline:"


def is_offline_url(url: str) -> bool:
    return url.startswith(OFFLINE_PREFIX)


class OfflineConnection:
    """
    Connection handle with no live endpoint behind it.
    """

    def __init__(self, url: str) -> None:
        if not is_offline_url(url):
            raise ConfigurationError(f"Offline URLs must start with '{OFFLINE_PREFIX}': {url!r}")
        target, _, query = url[len(OFFLINE_PREFIX) :].partition("?")
        if not target:
            raise ConfigurationError(f"Offline URL does not name a dialect: {url!r}")
        params = {key: values[0] for key, values in parse_qs(query).items()}

        self._url = url
        self.short_name = target.lower()
        self.params = params
        self._product_name = params.get("productName", target)
        self._product_version = params.get("version", "")
        self._closed = False
        self._autocommit = False

    def __repr__(self) -> str:
        return f"<OfflineConnection {self._url!r}>"

    def is_correct_implementation(self, dialect: "Dialect") -> bool:
        return dialect.short_name.lower() == self.short_name

    # ------------------------------------------------------------------ #
    # Metadata
    # ------------------------------------------------------------------ #
    @property
    def database_product_name(self) -> str:
        return self._product_name

    @property
    def database_product_version(self) -> str:
        return self._product_version

    @property
    def database_major_version(self) -> int:
        return split_version(self._product_version)[0]

    @property
    def database_minor_version(self) -> int:
        return split_version(self._product_version)[1]

    @property
    def url(self) -> str:
        return self._url

    @property
    def connection_user_name(self) -> str | None:
        return self.params.get("user")

    @property
    def catalog(self) -> str | None:
        return self.params.get("catalog")

    @property
    def autocommit(self) -> bool:
        self._ensure_open()
        return self._autocommit

    @autocommit.setter
    def autocommit(self, value: bool) -> None:
        self._ensure_open()
        self._autocommit = bool(value)

    @property
    def is_closed(self) -> bool:
        return self._closed

    def attached(self, dialect: "Dialect") -> None:
        words = self.params.get("reservedWords")
        if words:
            dialect.add_reserved_words(words.split(","))

    # ------------------------------------------------------------------ #
    # Transactions are no-ops: nothing is ever sent anywhere.
    # ------------------------------------------------------------------ #
    def commit(self) -> None:
        self._ensure_open()

    def rollback(self) -> None:
        self._ensure_open()

    def close(self) -> None:
        self._closed = True

    def native_sql(self, sql: str) -> str:
        self._ensure_open()
        return sql

    def _ensure_open(self) -> None:
        if self._closed:
            raise ConnectionClosedError("Offline connection is closed.")
