from typing import Any

from frontier_actions.actions.base_action import ModelAction, ModelType


class CountAction(ModelAction[ModelType]):
    def handle(self, conditions: dict[str, Any] | None = None) -> int:
        return self.where(conditions).count()
