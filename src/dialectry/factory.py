"""
Connection establishment: from a URL to an open connection handle and the
dialect bound to it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Mapping, Union

from .adapters.base import DriverCatalog
from .adapters.catalog import build_default_catalog
from .config import ConnectionSettings
from .connections.base import DatabaseConnection
from .connections.dbapi import DBAPIConnection
from .connections.offline import OfflineConnection, is_offline_url
from .dialects.base import Dialect
from .dialects.registry import DialectRegistry, get_registry
from .errors import ConfigurationError
from .properties import FilePropertySource, PropertySource
from .security.dsns import redact_url
from .security.redaction import redact_properties
from .utils import get_logger, time_call

DialectSelector = Union[str, Dialect, type[Dialect]]
PropertyProvider = Callable[[], Mapping[str, Any]]


class DatabaseFactory:
    """
    Opens connections and resolves their dialect.

    ``registry`` defaults to the process-wide registry, looked up on every call
    so :func:`~dialectry.dialects.reset_registry` takes effect.

    Passing ``dialect_class`` to :meth:`open_connection` forces that single
    dialect. By default this empties the real dialects of the registry in use,
    for every later caller in the process. With ``scoped_dialect_override=True``
    the override only applies to the call that asked for it.
    """

    def __init__(
        self,
        registry: DialectRegistry | None = None,
        drivers: DriverCatalog | None = None,
        *,
        property_source: PropertySource | None = None,
        scoped_dialect_override: bool = False,
    ) -> None:
        self._registry = registry
        self.drivers = drivers if drivers is not None else build_default_catalog()
        self.property_source = property_source if property_source is not None else FilePropertySource()
        self.scoped_dialect_override = scoped_dialect_override
        self.logger = get_logger("factory")

    @property
    def registry(self) -> DialectRegistry:
        return self._registry if self._registry is not None else get_registry()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #
    def open_connection(
        self,
        url: str,
        username: str | None = None,
        password: str | None = None,
        *,
        driver: str | None = None,
        dialect_class: DialectSelector | None = None,
        driver_properties_file: str | Path | None = None,
        property_provider: PropertyProvider | None = None,
        scoped_dialect_override: bool | None = None,
    ) -> DatabaseConnection:
        connection, _ = self._open(
            url,
            username,
            password,
            driver=driver,
            dialect_class=dialect_class,
            driver_properties_file=driver_properties_file,
            property_provider=property_provider,
            scoped_dialect_override=scoped_dialect_override,
        )
        return connection

    def open_database(
        self,
        url: str,
        username: str | None = None,
        password: str | None = None,
        *,
        driver: str | None = None,
        dialect_class: DialectSelector | None = None,
        driver_properties_file: str | Path | None = None,
        property_provider: PropertyProvider | None = None,
        scoped_dialect_override: bool | None = None,
    ) -> Dialect:
        """
        Open a connection and return the dialect resolved for it.
        """

        connection, registry = self._open(
            url,
            username,
            password,
            driver=driver,
            dialect_class=dialect_class,
            driver_properties_file=driver_properties_file,
            property_provider=property_provider,
            scoped_dialect_override=scoped_dialect_override,
        )
        try:
            return registry.resolve(connection)
        except Exception:
            connection.close()
            raise

    def open_from_settings(self, settings: ConnectionSettings) -> Dialect:
        self.logger.debug("Opening database from %s", settings.descriptive_label())
        return self.open_database(
            settings.url,
            settings.username,
            settings.password,
            driver=settings.driver,
            dialect_class=settings.dialect,
            driver_properties_file=settings.driver_properties_file,
            scoped_dialect_override=settings.scoped_dialect_override,
        )

    def resolve(self, connection: DatabaseConnection) -> Dialect:
        return self.registry.resolve(connection)

    def find_default_driver(self, url: str) -> str | None:
        return self.registry.find_default_driver(url)

    # ------------------------------------------------------------------ #
    # Steps
    # ------------------------------------------------------------------ #
    def _open(
        self,
        url: str,
        username: str | None,
        password: str | None,
        *,
        driver: str | None,
        dialect_class: DialectSelector | None,
        driver_properties_file: str | Path | None,
        property_provider: PropertyProvider | None,
        scoped_dialect_override: bool | None,
    ) -> tuple[DatabaseConnection, DialectRegistry]:
        if is_offline_url(url):
            self.logger.debug("Opening offline connection %s", url)
            return OfflineConnection(url), self.registry

        registry = self.registry
        if dialect_class is not None:
            scoped = self.scoped_dialect_override if scoped_dialect_override is None else scoped_dialect_override
            registry = self._force_dialect(registry, dialect_class, scoped=scoped)

        label = redact_url(url)
        identifier = (driver or "").strip() or None
        if identifier is None:
            identifier = registry.find_default_driver(url)
        if identifier is None:
            raise ConfigurationError(
                f"Driver was not specified and could not be determined from the url ({label})"
            )

        handle = self.drivers.resolve(identifier)
        properties = self._build_properties(username, password, driver_properties_file, property_provider)

        self.logger.info("Connecting to %s using driver %s", label, identifier)
        with time_call(f"{identifier}.connect", self.logger, target=label):
            native = handle.connect(url, properties)
        if native is None:
            raise ConfigurationError(
                f"Connection could not be created to {label} with driver {identifier}. "
                "Possibly the wrong driver for the given database URL"
            )
        return DBAPIConnection(native, handle, url=url), registry

    def _force_dialect(
        self, registry: DialectRegistry, selector: DialectSelector, *, scoped: bool
    ) -> DialectRegistry:
        if isinstance(selector, str):
            dialect = registry.get_by_name(selector)
            if dialect is None:
                raise ConfigurationError(f"Unknown dialect '{selector}'")
        else:
            dialect = selector

        if scoped:
            return registry.with_only(dialect)

        name = dialect.short_name
        self.logger.warning(
            "Forcing dialect '%s'; all other registered dialects are removed for this process.", name
        )
        registry.clear_registry()
        registry.register(dialect)
        return registry

    def _build_properties(
        self,
        username: str | None,
        password: str | None,
        driver_properties_file: str | Path | None,
        property_provider: PropertyProvider | None,
    ) -> dict[str, Any]:
        properties: dict[str, Any] = {}
        if property_provider is not None:
            properties.update(property_provider())
        if driver_properties_file is not None:
            properties.update(self.property_source.load(driver_properties_file))
        if username is not None:
            properties["user"] = username
        if password is not None:
            properties["password"] = password
        self.logger.debug("Driver properties: %s", redact_properties(properties))
        return properties


def open_connection(url: str, username: str | None = None, password: str | None = None, **kwargs: Any) -> DatabaseConnection:
    """
    Open a connection using the process-wide registry and built-in drivers.
    """

    return DatabaseFactory().open_connection(url, username, password, **kwargs)


def open_database(url: str, username: str | None = None, password: str | None = None, **kwargs: Any) -> Dialect:
    """
    Open a connection and resolve its dialect using the process-wide registry.
    """

    return DatabaseFactory().open_database(url, username, password, **kwargs)
