"""
Minimal type mapping: how a Python value is written as a SQL literal for a dialect.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from .dialects.base import Dialect
from .dialects.postgres import PostgresDialect


@dataclass(frozen=True)
class DatabaseFunction:
    """
    SQL expression emitted verbatim, e.g. ``CURRENT_TIMESTAMP``.
    """

    value: str

    def __str__(self) -> str:
        return self.value


class DataType:
    name = "unknown"

    def object_to_sql(self, value: Any, dialect: Dialect) -> str:
        raise NotImplementedError


class NullType(DataType):
    name = "null"

    def object_to_sql(self, value: Any, dialect: Dialect) -> str:
        return "NULL"


class FunctionType(DataType):
    name = "function"

    def object_to_sql(self, value: Any, dialect: Dialect) -> str:
        return str(value)


class BooleanType(DataType):
    name = "boolean"

    def object_to_sql(self, value: Any, dialect: Dialect) -> str:
        if isinstance(dialect, PostgresDialect):
            return "TRUE" if value else "FALSE"
        return "1" if value else "0"


class NumberType(DataType):
    name = "number"

    def object_to_sql(self, value: Any, dialect: Dialect) -> str:
        return str(value)


class CharType(DataType):
    name = "char"

    def object_to_sql(self, value: Any, dialect: Dialect) -> str:
        escaped = str(value).replace("'", "''")
        return f"'{escaped}'"


class DateTimeType(DataType):
    name = "datetime"

    def object_to_sql(self, value: Any, dialect: Dialect) -> str:
        if isinstance(value, datetime):
            return f"'{value.isoformat(sep=' ')}'"
        return f"'{value.isoformat()}'"


_NULL = NullType()
_FUNCTION = FunctionType()
_BOOLEAN = BooleanType()
_NUMBER = NumberType()
_CHAR = CharType()
_DATETIME = DateTimeType()


def from_object(value: Any, dialect: Dialect) -> DataType:
    if value is None:
        return _NULL
    if isinstance(value, DatabaseFunction):
        return _FUNCTION
    if isinstance(value, bool):
        return _BOOLEAN
    if isinstance(value, (int, float, Decimal)):
        return _NUMBER
    if isinstance(value, (datetime, date, time)):
        return _DATETIME
    if isinstance(value, str):
        return _CHAR
    raise TypeError(f"No SQL type mapping for {type(value).__name__} on {dialect.short_name}")


def object_to_sql(value: Any, dialect: Dialect) -> str:
    return from_object(value, dialect).object_to_sql(value, dialect)
