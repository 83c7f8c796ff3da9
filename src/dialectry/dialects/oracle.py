"""
Oracle dialect implementation.
"""

from __future__ import annotations

from typing import ClassVar

from .base import PRIORITY_DATABASE, Dialect, DialectCapabilities

ORACLE_RESERVED_WORDS = (
    "ACCESS", "AUDIT", "COMMENT", "COMPRESS", "EXCLUSIVE", "FILE", "IDENTIFIED",
    "INCREMENT", "LEVEL", "LOCK", "MODE", "NUMBER", "OFFLINE", "ONLINE", "PRIOR",
    "RAW", "RESOURCE", "ROW", "ROWID", "ROWNUM", "SESSION", "SIZE", "SYSDATE",
    "UID", "VALIDATE",
)


class OracleDialect(Dialect):
    """
    Oracle dialect using numeric bind variables and upper-case identifiers.
    """

    short_name: ClassVar[str] = "oracle"
    product_name: ClassVar[str | None] = "Oracle"
    priority: ClassVar[int] = PRIORITY_DATABASE
    url_schemes: ClassVar[tuple[str, ...]] = ("oracle",)
    default_driver_name: ClassVar[str | None] = "oracledb"
    param_style: ClassVar[str] = "numeric"
    capabilities: ClassVar[DialectCapabilities] = DialectCapabilities(
        supports_returning=True,
        supports_savepoints=True,
        supports_partial_indexes=False,
        supports_schema_namespaces=True,
        supports_sequences=True,
    )

    def __init__(self) -> None:
        super().__init__()
        self.add_reserved_words(ORACLE_RESERVED_WORDS)

    def escape_object_name(self, name: str) -> str:
        # Unquoted names are folded to upper case by the server.
        if name != name.upper():
            return self.quote_identifier(name)
        return super().escape_object_name(name)

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if offset is not None:
            parts.append(f"OFFSET {offset} ROWS")
        if limit is not None:
            parts.append(f"FETCH NEXT {limit} ROWS ONLY")
        return " ".join(parts)
