from typing import Any

from frontier_actions.actions.base_action import ModelAction, ModelType


class ExistsAction(ModelAction[ModelType]):
    """Check whether any record matches conditions"""

    def handle(self, conditions: dict[str, Any]) -> bool:
        return bool(self.db.query(self.where(conditions).exists()).scalar())
