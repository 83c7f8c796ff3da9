"""
Connection handle interfaces shared by live and offline connections.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..dialects.base import Dialect

_VERSION_RE = re.compile(r"(\d+)(?:\.(\d+))?")


@dataclass(frozen=True)
class ConnectionMetadata:
    """
    What an endpoint reports about itself; dialects match against this.
    """

    product_name: str
    product_version: str
    major_version: int = 0
    minor_version: int = 0
    url: str | None = None
    user_name: str | None = None
    catalog: str | None = None


def split_version(version: str) -> tuple[int, int]:
    """
    Extract ``(major, minor)`` from a free-form version string such as ``"16.2 (Debian)"``.
    """

    match = _VERSION_RE.search(version or "")
    if match is None:
        return 0, 0
    return int(match.group(1)), int(match.group(2) or 0)


class DatabaseConnection(Protocol):
    """
    Uniform handle over one native or simulated connection.
    """

    @property
    def database_product_name(self) -> str: ...

    @property
    def database_product_version(self) -> str: ...

    @property
    def database_major_version(self) -> int: ...

    @property
    def database_minor_version(self) -> int: ...

    @property
    def url(self) -> str: ...

    @property
    def connection_user_name(self) -> str | None: ...

    @property
    def catalog(self) -> str | None: ...

    @property
    def autocommit(self) -> bool: ...

    @property
    def is_closed(self) -> bool: ...

    def attached(self, dialect: "Dialect") -> None:
        """
        Called once a dialect is bound to this connection.
        """

    def commit(self) -> None: ...

    def rollback(self) -> None: ...

    def close(self) -> None:
        """
        Roll back and close. Implementations must be idempotent.
        """

    def native_sql(self, sql: str) -> str: ...
