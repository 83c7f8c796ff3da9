"""
Driver handle protocol and the catalog mapping driver identifiers to handles.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping, Protocol

from ..connections.base import ConnectionMetadata
from ..errors import ConfigurationError, DriverNotFoundError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(value: Any, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    normalized = str(value).strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def parse_float(value: Any, *, key: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid float value for '{key}': {value!r}", cause=exc) from exc


def parse_int(value: Any, *, key: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid integer value for '{key}': {value!r}", cause=exc) from exc


def pop_bool(query: dict[str, Any], key: str) -> bool | None:
    if key not in query:
        return None
    return parse_bool(query.pop(key), key=key)


_INT_OPTIONS = {"connect_timeout", "port"}


def coerce_options(properties: Mapping[str, Any]) -> dict[str, Any]:
    """
    Convert string property values into the types drivers expect.
    """

    options: dict[str, Any] = {}
    for key, value in properties.items():
        if key in _INT_OPTIONS and isinstance(value, str):
            options[key] = parse_int(value, key=key)
        else:
            options[key] = value
    return options


def query_one(connection: Any, sql: str) -> Any:
    cursor = connection.cursor()
    try:
        cursor.execute(sql)
        return cursor.fetchone()
    finally:
        cursor.close()


class DriverHandle(Protocol):
    """
    A loaded DB-API driver able to open native connections.
    """

    identifier: str

    def accepts_url(self, url: str) -> bool: ...

    def connect(self, url: str, properties: Mapping[str, Any]) -> Any | None:
        """
        Open a native connection, or return ``None`` when ``url`` is not for this driver.
        """

    def describe(self, connection: Any) -> ConnectionMetadata: ...

    def sql_keywords(self, connection: Any) -> list[str]: ...

    def get_autocommit(self, connection: Any) -> bool: ...

    def set_autocommit(self, connection: Any, value: bool) -> None: ...

    def is_closed(self, connection: Any) -> bool: ...


class DBAPIDriver:
    """
    Shared behaviour for DB-API 2.0 driver handles.
    """

    identifier: str = "dbapi"
    url_schemes: tuple[str, ...] = ()

    def __init__(self, module: Any) -> None:
        self.module = module

    def __repr__(self) -> str:
        return f"<{type(self).__name__} identifier={self.identifier!r}>"

    def accepts_url(self, url: str) -> bool:
        scheme = url.split(":", 1)[0].split("+", 1)[0].lower()
        return scheme in self.url_schemes

    def connect(self, url: str, properties: Mapping[str, Any]) -> Any | None:
        if not self.accepts_url(url):
            return None
        options = coerce_options(properties)
        autocommit = options.pop("autocommit", None)
        connection = self._open(url, options)
        if connection is not None and autocommit is not None:
            self.set_autocommit(connection, parse_bool(autocommit, key="autocommit"))
        return connection

    def _open(self, url: str, options: dict[str, Any]) -> Any | None:
        raise NotImplementedError

    def describe(self, connection: Any) -> ConnectionMetadata:
        raise NotImplementedError

    def sql_keywords(self, connection: Any) -> list[str]:
        return []

    def get_autocommit(self, connection: Any) -> bool:
        return bool(getattr(connection, "autocommit", False))

    def set_autocommit(self, connection: Any, value: bool) -> None:
        connection.autocommit = value

    def is_closed(self, connection: Any) -> bool:
        return bool(getattr(connection, "closed", False))


DriverFactory = Callable[[], DriverHandle]


class DriverCatalog:
    """
    Explicit table of driver identifiers and the factories that load them.
    """

    def __init__(self, factories: Mapping[str, DriverFactory] | None = None) -> None:
        self._factories: dict[str, DriverFactory] = dict(factories or {})

    def register(self, identifier: str, factory: DriverFactory) -> None:
        self._factories[identifier] = factory

    def identifiers(self) -> Iterable[str]:
        return tuple(self._factories)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._factories

    def resolve(self, identifier: str) -> DriverHandle:
        factory = self._factories.get(identifier)
        if factory is None:
            raise DriverNotFoundError(identifier)
        try:
            return factory()
        except DriverNotFoundError:
            raise
        except Exception as exc:
            raise DriverNotFoundError(
                identifier, f"Cannot instantiate database driver '{identifier}': {exc}", cause=exc
            ) from exc
