"""
Connection settings, optionally read from the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from .adapters.base import parse_bool
from .errors import ConfigurationError
from .security.dsns import redact_url

ENV_PREFIX = "DIALECTRY_"


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass
class ConnectionSettings:
    """
    Everything needed to open a database through :class:`~dialectry.factory.DatabaseFactory`.
    """

    url: str
    username: str | None = None
    password: str | None = None
    driver: str | None = None
    dialect: str | None = None
    driver_properties_file: str | None = None
    scoped_dialect_override: bool = False
    source: str | None = None

    @classmethod
    def from_env(
        cls,
        prefix: str = ENV_PREFIX,
        *,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> "ConnectionSettings":
        """
        Build settings from ``<prefix>URL``, ``<prefix>USERNAME``, ``<prefix>PASSWORD``,
        ``<prefix>DRIVER``, ``<prefix>DIALECT``, ``<prefix>DRIVER_PROPERTIES_FILE`` and
        ``<prefix>SCOPED_DIALECT_OVERRIDE``. Keyword overrides win over the environment.
        """

        env = os.environ if environ is None else environ

        def read(name: str) -> str | None:
            return _blank_to_none(env.get(f"{prefix}{name}"))

        url = overrides.pop("url", None) or read("URL")
        if not url:
            raise ConfigurationError(f"Environment variable {prefix}URL is not set")

        scoped_raw = read("SCOPED_DIALECT_OVERRIDE")
        values: dict[str, Any] = {
            "username": read("USERNAME"),
            "password": read("PASSWORD"),
            "driver": read("DRIVER"),
            "dialect": read("DIALECT"),
            "driver_properties_file": read("DRIVER_PROPERTIES_FILE"),
            "scoped_dialect_override": (
                parse_bool(scoped_raw, key=f"{prefix}SCOPED_DIALECT_OVERRIDE") if scoped_raw else False
            ),
            "source": f"{prefix}URL",
        }
        values.update(overrides)
        return cls(url=url, **values)

    def redacted_url(self) -> str:
        """
        Return a URL safe for logging (credentials removed).
        """

        return redact_url(self.url)

    def descriptive_label(self) -> str:
        """
        Describe the settings source for diagnostics.
        """

        redacted = self.redacted_url()
        if self.source:
            return f"{self.source} ({redacted})"
        return redacted
