from typing import Any

from frontier_actions.actions.base_action import ModelAction, ModelType
from frontier_actions.util.logger import logger


class UpdateAction(ModelAction[ModelType]):
    def handle(self, conditions: dict[str, Any], values: dict[str, Any]) -> int:
        """
        Update every record matching conditions.

        Args:
            conditions: Equality filter
            values: Columns to set on the matched rows

        Returns:
            Number of affected rows
        """
        if not values:
            return 0

        with self.transaction():
            affected = self.where(conditions).update(values)
        logger.debug("Updated %d %s row(s) where %r", affected, self.model.__name__, conditions)
        return affected
