from typing import Any

from frontier_actions.actions.base_action import ModelAction, ModelType
from frontier_actions.util.logger import logger


class DeleteAction(ModelAction[ModelType]):
    """Delete records matching conditions, returns the number of deleted rows"""

    def handle(self, conditions: dict[str, Any]) -> int:
        with self.transaction():
            deleted = self.where(conditions).delete()
        logger.debug("Deleted %d %s row(s) where %r", deleted, self.model.__name__, conditions)
        return deleted
