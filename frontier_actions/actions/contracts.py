from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Action(Protocol):
    """
    Single-purpose unit of business logic.

    ``exec`` builds the action through the container and runs it,
    ``execute`` runs an already constructed instance.
    """

    @classmethod
    def exec(cls, *args: Any, **kwargs: Any) -> Any: ...

    def execute(self, *args: Any, **kwargs: Any) -> Any: ...
