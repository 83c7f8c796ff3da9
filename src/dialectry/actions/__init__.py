"""
Schema-change actions and the logic that turns them into SQL.
"""

from .add_columns import AddColumnsAction, AddColumnsLogic, ColumnDefinition
from .base import Action, ActionLogic, ActionLogicRegistry, Scope
from .oracle import OracleAddColumnsLogic


def build_default_action_registry() -> ActionLogicRegistry:
    registry = ActionLogicRegistry()
    registry.register_generic(AddColumnsLogic())
    registry.register(OracleAddColumnsLogic())
    return registry


__all__ = [
    "Action",
    "ActionLogic",
    "ActionLogicRegistry",
    "AddColumnsAction",
    "AddColumnsLogic",
    "ColumnDefinition",
    "OracleAddColumnsLogic",
    "Scope",
    "build_default_action_registry",
]
