"""
Sentinel dialect returned when no registered dialect matches an endpoint.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from .base import Dialect

if TYPE_CHECKING:
    from ..connections.base import DatabaseConnection


class UnsupportedDialect(Dialect):
    """
    Placeholder bound to connections nobody recognises. Generic SQL rules
    still work; nothing vendor specific is available.
    """

    short_name: ClassVar[str] = "unsupported"
    priority: ClassVar[int] = -1

    def is_correct_implementation(self, connection: "DatabaseConnection") -> bool:
        return False

    def default_driver(self, url: str) -> str | None:
        return None
