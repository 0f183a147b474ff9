from typing import Any

from sqlalchemy import inspect

from frontier_actions.actions.base_action import ModelAction, ModelType
from frontier_actions.util.logger import logger


class UpdateOrCreateAction(ModelAction[ModelType]):
    def handle(self, conditions: dict[str, Any], values: dict[str, Any]) -> ModelType:
        """
        Update the first record matching conditions, or create one.

        A new record is built from conditions merged with values, values
        winning on shared keys. Keys that are not mapped attributes of the
        model raise TypeError on either path.
        """
        self.check_attributes(values)

        with self.transaction():
            instance = self.where(conditions).first()
            if instance is None:
                instance = self.model(**{**conditions, **values})
                self.db.add(instance)
                logger.debug("No %s matched %r, creating", self.model.__name__, conditions)
            else:
                for key, value in values.items():
                    setattr(instance, key, value)
        self.db.refresh(instance)
        return instance

    def check_attributes(self, values: dict[str, Any]) -> None:
        mapped = inspect(self.model).attrs.keys()
        unknown = sorted(set(values) - set(mapped))
        if unknown:
            raise TypeError(
                f"{', '.join(map(repr, unknown))} not mapped on {self.model.__name__}"
            )
