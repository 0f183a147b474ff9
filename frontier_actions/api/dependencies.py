from typing import Callable, TypeVar

from fastapi import Depends
from sqlalchemy.orm import Session

from frontier_actions.actions.base_action import ModelAction
from frontier_actions.adapters.db.base import get_db

ActionT = TypeVar("ActionT", bound=ModelAction)


def provide_action(action_cls: type[ActionT]) -> Callable[..., ActionT]:
    """
    Build a FastAPI dependency that hands out ``action_cls`` bound to the
    request's database session.

    Usage in routes:
        @router.post("/users")
        def create_user(
            data: UserCreate,
            create: CreateUserAction = Depends(provide_action(CreateUserAction)),
        ):
            return create.execute(data.model_dump())
    """

    def dependency(db: Session = Depends(get_db)) -> ActionT:
        return action_cls(db)

    dependency.__name__ = f"provide_{action_cls.__name__}"
    return dependency
