from typing import Any

from frontier_actions.actions.base_action import ModelAction, ModelType
from frontier_actions.actions.errors import RecordNotFound


class FindOrFailAction(ModelAction[ModelType]):
    """Find the first record matching conditions or raise RecordNotFound"""

    def handle(self, conditions: dict[str, Any]) -> ModelType:
        instance = self.where(conditions).first()
        if instance is None:
            raise RecordNotFound(self.model, conditions)
        return instance
