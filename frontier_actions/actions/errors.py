from typing import Any


class ActionError(Exception):
    """Base class for errors raised by actions themselves"""


class MethodNotImplemented(ActionError, NotImplementedError):
    def __init__(self, action: type):
        self.action = action
        super().__init__(
            f"{action.__module__}.{action.__qualname__} must implement the handle() method"
        )


class RecordNotFound(ActionError, LookupError):
    def __init__(self, model: type, conditions: dict[str, Any] | None = None):
        self.model = model
        self.conditions = dict(conditions or {})
        super().__init__(
            f"No {model.__name__} record found matching {self.conditions!r}"
        )


class ResolutionError(ActionError, TypeError):
    def __init__(self, target: type, parameter: str):
        self.target = target
        self.parameter = parameter
        super().__init__(
            f"Cannot resolve parameter '{parameter}' of {target.__qualname__}: "
            "no provider bound for its type"
        )
