"""
Error hierarchy raised by dialectry.

Every failure this layer raises itself is a :class:`DatabaseError`; the
original exception, when there is one, is chained as ``__cause__`` and also
exposed as :attr:`DatabaseError.cause`. Exceptions raised by a native driver
while talking to the server are not wrapped.
"""

from __future__ import annotations


class DatabaseError(RuntimeError):
    """Base error for dialect resolution and connection failures."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class ConfigurationError(DatabaseError):
    """Raised when a connection cannot be set up from the supplied configuration."""


class DriverNotFoundError(ConfigurationError):
    """Raised when a driver identifier cannot be located or loaded."""

    def __init__(self, identifier: str, message: str | None = None, *, cause: BaseException | None = None) -> None:
        super().__init__(message or f"Cannot find database driver '{identifier}'.", cause=cause)
        self.identifier = identifier


class UnexpectedStateError(DatabaseError):
    """Raised on programming-contract violations, e.g. a dialect class that cannot be built."""


class ConnectionClosedError(DatabaseError):
    """Raised when a closed connection handle is used."""
