from frontier_actions.actions import (
    Action,
    ActionError,
    BaseAction,
    MethodNotImplemented,
    ModelAction,
    Page,
    RecordNotFound,
)

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionError",
    "BaseAction",
    "MethodNotImplemented",
    "ModelAction",
    "Page",
    "RecordNotFound",
    "__version__",
]
