from typing import Any

from frontier_actions.actions.base_action import ModelAction, ModelType


class FindAction(ModelAction[ModelType]):
    """Find the first record matching conditions, or None"""

    def handle(self, conditions: dict[str, Any]) -> ModelType | None:
        return self.where(conditions).first()
