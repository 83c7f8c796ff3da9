"""
Dialect registry and resolution.

The registry keeps prototypes in two groups, real and internal, each keyed by
short name. Variants sharing a name are ranked by descending priority; equal
priorities keep registration order. Resolution only ever looks at the top
variant of each real name.
"""

from __future__ import annotations

import itertools
import threading
from importlib.metadata import entry_points
from typing import TYPE_CHECKING, Iterable, Type, Union

from ..connections.offline import OfflineConnection
from ..errors import UnexpectedStateError
from ..utils import get_logger
from .base import Dialect
from .mock import MockDialect
from .mysql import MariaDBDialect, MySQLDialect
from .oracle import OracleDialect
from .postgres import PostgresDialect
from .sqlite import SQLiteDialect
from .unsupported import UnsupportedDialect

if TYPE_CHECKING:
    from ..connections.base import DatabaseConnection

DialectLike = Union[Dialect, Type[Dialect]]

ENTRY_POINT_GROUP = "dialectry.dialects"

BUILTIN_DIALECTS: tuple[Type[Dialect], ...] = (
    PostgresDialect,
    MySQLDialect,
    MariaDBDialect,
    SQLiteDialect,
    OracleDialect,
    MockDialect,
)

_Ranked = list[tuple[int, Dialect]]


def _rank(entry: tuple[int, Dialect]) -> tuple[int, int]:
    sequence, dialect = entry
    return (-dialect.priority, sequence)


def instantiate_dialect(dialect_class: Type[Dialect]) -> Dialect:
    try:
        return dialect_class()
    except Exception as exc:
        raise UnexpectedStateError(
            f"Cannot instantiate dialect {dialect_class.__name__}; dialects need a no-argument constructor.",
            cause=exc,
        ) from exc


def _as_prototype(dialect: DialectLike) -> Dialect:
    if isinstance(dialect, type):
        if not issubclass(dialect, Dialect):
            raise TypeError(f"{dialect.__name__} is not a Dialect subclass.")
        return instantiate_dialect(dialect)
    if not isinstance(dialect, Dialect):
        raise TypeError(f"Expected a Dialect, got {type(dialect).__name__}.")
    return dialect


class DialectRegistry:
    """
    Holds every known dialect and picks the one matching a connection.
    """

    def __init__(self, dialects: Iterable[DialectLike] = ()) -> None:
        self._real: dict[str, _Ranked] = {}
        self._internal: dict[str, _Ranked] = {}
        self._sequence = itertools.count()
        self._frozen = False
        self.logger = get_logger("dialects.registry")
        for dialect in dialects:
            self.register(dialect)

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #
    def register(self, dialect: DialectLike) -> Dialect:
        """
        Register ``dialect`` (an instance or a subclass) and return the stored prototype.

        Registering a class already present under the same name is a no-op.
        """

        self._check_mutable()
        prototype = _as_prototype(dialect)
        mapping = self._internal if prototype.internal else self._real
        ranked = mapping.setdefault(prototype.short_name, [])
        for _, existing in ranked:
            if type(existing) is type(prototype):
                return existing
        ranked.append((next(self._sequence), prototype))
        ranked.sort(key=_rank)
        self.logger.debug(
            "Registered dialect %s (name=%s, priority=%s, internal=%s)",
            type(prototype).__name__,
            prototype.short_name,
            prototype.priority,
            prototype.internal,
        )
        return prototype

    def clear_registry(self) -> None:
        """
        Remove every real dialect, built-in ones included. Internal dialects stay.
        """

        self._check_mutable()
        self._real.clear()

    def with_only(self, dialect: DialectLike) -> "DialectRegistry":
        """
        Return a new registry whose only real dialect is ``dialect``; this one is untouched.
        """

        scoped = DialectRegistry()
        scoped._internal = {name: list(ranked) for name, ranked in self._internal.items()}
        scoped.register(dialect)
        return scoped

    def snapshot(self) -> "DialectRegistry":
        """
        Return a read-only copy for concurrent readers.
        """

        frozen = DialectRegistry()
        frozen._real = {name: list(ranked) for name, ranked in self._real.items()}
        frozen._internal = {name: list(ranked) for name, ranked in self._internal.items()}
        frozen._frozen = True
        return frozen

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("Dialect registry snapshot is read-only.")

    # ------------------------------------------------------------------ #
    # Lookup
    # ------------------------------------------------------------------ #
    def list_real(self) -> list[Dialect]:
        return [ranked[0][1] for ranked in self._real.values() if ranked]

    def list_internal(self) -> list[Dialect]:
        return [ranked[0][1] for ranked in self._internal.values() if ranked]

    def get_by_name(self, short_name: str) -> Dialect | None:
        ranked = self._real.get(short_name)
        if not ranked:
            return None
        return ranked[0][1]

    def get_all_by_name(self, short_name: str) -> list[Dialect]:
        return [dialect for _, dialect in self._real.get(short_name, [])]

    def get_internal_by_name(self, short_name: str) -> Dialect | None:
        ranked = self._internal.get(short_name)
        if not ranked:
            return None
        return ranked[0][1]

    def _ranked_real(self) -> list[Dialect]:
        tops = [ranked[0] for ranked in self._real.values() if ranked]
        return [dialect for _, dialect in sorted(tops, key=_rank)]

    def find_default_driver(self, url: str) -> str | None:
        for dialect in self._ranked_real():
            driver = dialect.default_driver(url)
            if driver is not None:
                return driver
        return None

    # ------------------------------------------------------------------ #
    # Resolution
    # ------------------------------------------------------------------ #
    def resolve(self, connection: "DatabaseConnection") -> Dialect:
        """
        Return a new dialect instance bound to ``connection``.

        When nothing matches, an :class:`UnsupportedDialect` is bound and a
        warning logged instead of raising.
        """

        candidates = [dialect for dialect in self._ranked_real() if self._matches(dialect, connection)]

        if not candidates:
            self.logger.warning("Unknown database: %s", connection.database_product_name)
            unsupported = UnsupportedDialect()
            unsupported.set_connection(connection)
            return unsupported

        winner = candidates[0]
        if len(candidates) > 1:
            self.logger.debug(
                "Dialect %s chosen over %s",
                winner.short_name,
                ", ".join(candidate.short_name for candidate in candidates[1:]),
            )
        dialect = instantiate_dialect(type(winner))
        dialect.set_connection(connection)
        return dialect

    find_correct_implementation = resolve

    @staticmethod
    def _matches(dialect: Dialect, connection: "DatabaseConnection") -> bool:
        if isinstance(connection, OfflineConnection):
            return connection.is_correct_implementation(dialect)
        return dialect.is_correct_implementation(connection)


def load_entry_point_dialects(registry: DialectRegistry, group: str = ENTRY_POINT_GROUP) -> None:
    """
    Register every dialect advertised under the ``group`` entry point group.
    """

    for entry_point in entry_points(group=group):
        try:
            registry.register(entry_point.load())
        except Exception as exc:
            raise UnexpectedStateError(f"Error registering {entry_point.value}", cause=exc) from exc


def build_default_registry() -> DialectRegistry:
    registry = DialectRegistry(BUILTIN_DIALECTS)
    load_entry_point_dialects(registry)
    return registry


_default_registry: DialectRegistry | None = None
_default_lock = threading.Lock()


def get_registry() -> DialectRegistry:
    """
    Return the process-wide registry, building it on first use.
    """

    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = build_default_registry()
        return _default_registry


def reset_registry() -> DialectRegistry:
    """
    Discard the process-wide registry and rebuild it from built-ins and entry points.
    """

    global _default_registry
    with _default_lock:
        _default_registry = build_default_registry()
        return _default_registry


def set_registry(registry: DialectRegistry) -> None:
    global _default_registry
    with _default_lock:
        _default_registry = registry
