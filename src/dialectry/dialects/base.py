"""
Dialect descriptors: per-vendor models of SQL behaviour.

A :class:`Dialect` subclass describes one vendor dialect. The registry keeps a
prototype instance of each subclass for matching; every resolution builds a new
instance with the no-argument constructor and binds it to a single connection.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Iterable

if TYPE_CHECKING:
    from ..connections.base import DatabaseConnection

PRIORITY_DEFAULT = 1
PRIORITY_DATABASE = 5
PRIORITY_SPECIALIZED = 10

_SIMPLE_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Words reserved in SQL:2003 that every vendor treats as reserved.
SQL_RESERVED_WORDS = frozenset(
    {
        "ALL", "ALTER", "AND", "ANY", "AS", "BETWEEN", "BY", "CASE", "CHECK", "COLUMN",
        "CONSTRAINT", "CREATE", "CROSS", "CURRENT_DATE", "CURRENT_TIME", "CURRENT_TIMESTAMP",
        "CURRENT_USER", "DEFAULT", "DELETE", "DISTINCT", "DROP", "ELSE", "END", "EXISTS",
        "FALSE", "FOR", "FOREIGN", "FROM", "FULL", "GRANT", "GROUP", "HAVING", "IN", "INNER",
        "INSERT", "INTERSECT", "INTO", "IS", "JOIN", "LEFT", "LIKE", "NOT", "NULL", "ON", "OR",
        "ORDER", "OUTER", "PRIMARY", "REFERENCES", "RIGHT", "SELECT", "SET", "TABLE", "THEN",
        "TO", "TRUE", "UNION", "UNIQUE", "UPDATE", "USER", "USING", "VALUES", "WHEN", "WHERE",
        "WITH",
    }
)


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags describing backend capabilities.
    """

    supports_returning: bool = False
    supports_savepoints: bool = True
    supports_partial_indexes: bool = False
    supports_schema_namespaces: bool = False
    supports_sequences: bool = False


class Dialect:
    """
    Base dialect. Subclasses override the class attributes and whichever
    generation rules differ for their vendor.
    """

    short_name: ClassVar[str] = "generic"
    # Product name the endpoint reports; ``None`` never matches a live connection.
    product_name: ClassVar[str | None] = None
    priority: ClassVar[int] = PRIORITY_DEFAULT
    internal: ClassVar[bool] = False
    url_schemes: ClassVar[tuple[str, ...]] = ()
    default_driver_name: ClassVar[str | None] = None
    param_style: ClassVar[str] = "qmark"
    quote_char: ClassVar[str] = '"'
    capabilities: ClassVar[DialectCapabilities] = DialectCapabilities()

    def __init__(self) -> None:
        self._connection: DatabaseConnection | None = None
        self._reserved_words: set[str] = set(SQL_RESERVED_WORDS)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} short_name={self.short_name!r} priority={self.priority}>"

    # ------------------------------------------------------------------ #
    # Descriptor contract
    # ------------------------------------------------------------------ #
    def is_correct_implementation(self, connection: "DatabaseConnection") -> bool:
        if self.product_name is None:
            return False
        reported = connection.database_product_name or ""
        return reported.lower().startswith(self.product_name.lower())

    def default_driver(self, url: str) -> str | None:
        """
        Driver identifier to use for ``url`` when none was given, or ``None``
        when this dialect does not recognise the URL.

        A ``scheme+driver://`` URL selects ``driver`` explicitly.
        """

        scheme = url.split(":", 1)[0].lower()
        backend, _, driver = scheme.partition("+")
        if backend not in self.url_schemes:
            return None
        return driver or self.default_driver_name

    # ------------------------------------------------------------------ #
    # Connection binding
    # ------------------------------------------------------------------ #
    @property
    def connection(self) -> "DatabaseConnection | None":
        return self._connection

    def set_connection(self, connection: "DatabaseConnection") -> None:
        if self._connection is not None and self._connection is not connection:
            raise ValueError(f"{type(self).__name__} is already bound to another connection.")
        self._connection = connection
        connection.attached(self)

    def add_reserved_words(self, words: Iterable[str]) -> None:
        for word in words:
            word = word.strip().upper()
            if word:
                self._reserved_words.add(word)

    def is_reserved_word(self, word: str) -> bool:
        return word.upper() in self._reserved_words

    # ------------------------------------------------------------------ #
    # Generation rules
    # ------------------------------------------------------------------ #
    def quote_identifier(self, identifier: str) -> str:
        quote = self.quote_char
        escaped = identifier.replace(quote, quote * 2)
        return f"{quote}{escaped}{quote}"

    def escape_object_name(self, name: str) -> str:
        """
        Quote ``name`` only when it is reserved or not a plain identifier.
        """

        if self.is_reserved_word(name) or not _SIMPLE_IDENTIFIER_RE.match(name):
            return self.quote_identifier(name)
        return name

    def format_table(self, table_name: str) -> str:
        if self.capabilities.supports_schema_namespaces and "." in table_name:
            schema, table = table_name.split(".", 1)
            return f"{self.escape_object_name(schema)}.{self.escape_object_name(table)}"
        return self.escape_object_name(table_name)

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if limit is not None:
            parts.append(f"LIMIT {limit}")
        if offset is not None:
            parts.append(f"OFFSET {offset}")
        return " ".join(parts)

    def parameter_placeholder(self, position: int | None = None) -> str:
        if self.param_style in ("format", "pyformat"):
            return "%s"
        if self.param_style == "numeric":
            return f":{position or 1}"
        return "?"
