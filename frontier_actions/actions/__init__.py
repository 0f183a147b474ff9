from frontier_actions.actions.base_action import BaseAction, ModelAction
from frontier_actions.actions.contracts import Action
from frontier_actions.actions.container import Container, container
from frontier_actions.actions.errors import (
    ActionError,
    MethodNotImplemented,
    RecordNotFound,
    ResolutionError,
)
from frontier_actions.actions.pagination import Page, paginate

__all__ = [
    "Action",
    "ActionError",
    "BaseAction",
    "Container",
    "MethodNotImplemented",
    "ModelAction",
    "Page",
    "RecordNotFound",
    "ResolutionError",
    "container",
    "paginate",
]
