"""
Action logic dispatch.

Each action type has one generic logic plus any number of specialized
logics. Specialized logics are tried highest priority first; the first whose
``supports`` holds generates the SQL. When none does, the generic logic runs.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Tuple, Type

from ..dialects.base import PRIORITY_DEFAULT, Dialect
from ..errors import UnexpectedStateError


@dataclass
class Scope:
    """
    Context an action is generated in: the bound dialect plus free-form attributes.
    """

    dialect: Dialect
    attributes: dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)


class Action:
    """
    Marker base for schema-change actions.
    """


class ActionLogic:
    action_type: ClassVar[Type[Action]] = Action
    priority: ClassVar[int] = PRIORITY_DEFAULT

    def supports(self, action: Action, scope: Scope) -> bool:
        return isinstance(action, self.action_type)

    def generate(self, action: Action, scope: Scope) -> List[str]:
        raise NotImplementedError


class ActionLogicRegistry:
    def __init__(self) -> None:
        self._generic: Dict[Type[Action], ActionLogic] = {}
        self._specialized: Dict[Type[Action], List[Tuple[int, ActionLogic]]] = {}
        self._sequence = itertools.count()

    def register_generic(self, logic: ActionLogic) -> None:
        self._generic[logic.action_type] = logic

    def register(self, logic: ActionLogic) -> None:
        ranked = self._specialized.setdefault(logic.action_type, [])
        ranked.append((next(self._sequence), logic))
        ranked.sort(key=lambda entry: (-entry[1].priority, entry[0]))

    def logic_for(self, action: Action, scope: Scope) -> ActionLogic:
        action_type = type(action)
        for _, logic in self._specialized.get(action_type, []):
            if logic.supports(action, scope):
                return logic
        generic = self._generic.get(action_type)
        if generic is None:
            raise UnexpectedStateError(f"No logic registered for {action_type.__name__}")
        return generic

    def generate(self, action: Action, scope: Scope) -> List[str]:
        return self.logic_for(action, scope).generate(action, scope)
