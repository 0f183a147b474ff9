from contextlib import contextmanager
from typing import Any, ClassVar, Generic, Iterator, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from frontier_actions.actions.container import Container, container
from frontier_actions.actions.errors import MethodNotImplemented
from frontier_actions.util.logger import logger

ModelType = TypeVar("ModelType")


class BaseAction:
    """
    Base class of every action.

    Subclasses implement a single ``handle`` method. Call ``execute`` on an
    instance you built yourself, or ``exec`` on the class to let the
    container build it:

        user = CreateUserAction.exec({"name": "John", "email": "john@x.com"})
    """

    container: ClassVar[Container] = container

    @classmethod
    def exec(cls, *args: Any, **kwargs: Any) -> Any:
        with cls.container.scope() as scope:
            return scope.make(cls).execute(*args, **kwargs)

    def execute(self, *args: Any, **kwargs: Any) -> Any:
        handle = getattr(self, "handle", None)
        if not callable(handle):
            raise MethodNotImplemented(type(self))

        logger.debug("Dispatching %s", type(self).__qualname__)
        return handle(*args, **kwargs)


class ModelAction(BaseAction, Generic[ModelType]):
    """
    Action bound to an ORM model.

    Set ``model`` on the subclass, or pass it to the constructor:

        class CreateUserAction(CreateAction[UserModel]):
            model = UserModel
    """

    model: type[ModelType] | None = None

    def __init__(self, db: Session, model: type[ModelType] | None = None):
        self.db = db
        if model is not None:
            self.model = model
        if self.model is None:
            raise TypeError(f"{type(self).__qualname__} has no model bound")

    def query(self) -> Query:
        return self.db.query(self.model)

    def where(self, conditions: dict[str, Any] | None = None) -> Query:
        return self.query().filter_by(**(conditions or {}))

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Commit on success; roll back and re-raise storage errors untouched"""
        try:
            yield
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
