"""
Internal dialect used to generate SQL without a real target.
"""

from __future__ import annotations

from typing import ClassVar

from .base import Dialect


class MockDialect(Dialect):
    short_name: ClassVar[str] = "mock"
    internal: ClassVar[bool] = True
