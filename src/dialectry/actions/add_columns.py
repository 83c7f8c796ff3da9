"""
Generic ``ALTER TABLE ... ADD`` generation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, List, Type, cast

from ..datatypes import object_to_sql
from .base import Action, ActionLogic, Scope


@dataclass
class ColumnDefinition:
    name: str
    type: str
    nullable: bool = True
    default_value: Any = None
    primary_key: bool = False
    unique: bool = False


@dataclass
class AddColumnsAction(Action):
    table_name: str
    columns: List[ColumnDefinition] = field(default_factory=list)


class AddColumnsLogic(ActionLogic):
    """
    One ``ALTER TABLE`` statement per column, valid on every supported backend.
    """

    action_type: ClassVar[Type[Action]] = AddColumnsAction

    def generate(self, action: Action, scope: Scope) -> List[str]:
        action = cast(AddColumnsAction, action)
        if not action.columns:
            raise ValueError(f"No columns given to add to '{action.table_name}'.")
        table = scope.dialect.format_table(action.table_name)
        return [
            f"ALTER TABLE {table} ADD {self.column_sql(column, action, scope)}"
            for column in action.columns
        ]

    def column_sql(self, column: ColumnDefinition, action: AddColumnsAction, scope: Scope) -> str:
        if not column.type:
            raise ValueError(f"Column '{column.name}' missing type.")
        pieces = [scope.dialect.escape_object_name(column.name), column.type]
        default_sql = self.default_value_clause(column, action, scope)
        if default_sql:
            pieces.append(default_sql)
        if column.primary_key or not column.nullable:
            pieces.append("NOT NULL")
        if column.primary_key:
            pieces.append("PRIMARY KEY")
        elif column.unique:
            pieces.append("UNIQUE")
        return " ".join(pieces)

    def default_value_clause(self, column: ColumnDefinition, action: AddColumnsAction, scope: Scope) -> str | None:
        if column.default_value is None:
            return None
        return f"DEFAULT {object_to_sql(column.default_value, scope.dialect)}"
