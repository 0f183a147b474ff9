from typing import Any

from frontier_actions.actions.base_action import ModelAction, ModelType
from frontier_actions.util.logger import logger


class CreateAction(ModelAction[ModelType]):
    """Create a new record"""

    def handle(self, values: dict[str, Any]) -> ModelType:
        instance = self.model(**values)
        with self.transaction():
            self.db.add(instance)
        self.db.refresh(instance)
        logger.debug("Created %s %r", self.model.__name__, instance)
        return instance
