"""
Oracle-specific column addition.
"""

from __future__ import annotations

from typing import ClassVar

from ..datatypes import DatabaseFunction, from_object
from ..dialects.base import PRIORITY_SPECIALIZED
from ..dialects.oracle import OracleDialect
from .add_columns import AddColumnsAction, AddColumnsLogic, ColumnDefinition
from .base import Action, Scope

GENERATED_PREFIX = "GENERATED ALWAYS "


class OracleAddColumnsLogic(AddColumnsLogic):
    """
    Virtual columns (``GENERATED ALWAYS AS (...)``) replace the default clause
    instead of following ``DEFAULT``.
    """

    priority: ClassVar[int] = PRIORITY_SPECIALIZED

    def supports(self, action: Action, scope: Scope) -> bool:
        return super().supports(action, scope) and isinstance(scope.dialect, OracleDialect)

    def default_value_clause(self, column: ColumnDefinition, action: AddColumnsAction, scope: Scope) -> str | None:
        default_value = column.default_value
        if default_value is None:
            return None
        if str(default_value).startswith(GENERATED_PREFIX):
            expression = DatabaseFunction(str(default_value))
            return from_object(expression, scope.dialect).object_to_sql(expression, scope.dialect)
        return AddColumnsLogic.default_value_clause(self, column, action, scope)
