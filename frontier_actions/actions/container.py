import inspect
import typing
from contextlib import ExitStack, contextmanager
from typing import Any, Callable, Iterator, TypeVar

from sqlalchemy.orm import Session

from frontier_actions.actions.errors import ResolutionError
from frontier_actions.adapters.db.base import get_db

T = TypeVar("T")


class Scope:
    """
    Resolution scope of a single ``exec`` call.

    Each bound type is provided at most once per scope. Generator providers
    are closed together with the scope, the same way FastAPI finalises
    ``yield`` dependencies after a request.
    """

    def __init__(self, container: "Container", stack: ExitStack):
        self._container = container
        self._stack = stack
        self._instances: dict[type, Any] = {}

    def get(self, key: type) -> Any:
        if key not in self._instances:
            provider = self._container.provider_for(key)
            if inspect.isgeneratorfunction(provider):
                value = self._stack.enter_context(contextmanager(provider)())
            else:
                value = provider()
            self._instances[key] = value
        return self._instances[key]

    def make(self, cls: type[T]) -> T:
        try:
            hints = typing.get_type_hints(cls.__init__)
        except (NameError, TypeError):
            hints = {}

        kwargs = {}
        signature = inspect.signature(cls.__init__)
        for name, param in list(signature.parameters.items())[1:]:
            if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
                continue
            annotation = hints.get(name)
            if annotation is not None and self._container.has(annotation):
                kwargs[name] = self.get(annotation)
            elif param.default is param.empty:
                raise ResolutionError(cls, name)
        return cls(**kwargs)


class Container:
    def __init__(self):
        self._providers: dict[type, Callable[[], Any]] = {}

    def bind(self, key: type, provider: Callable[[], Any]) -> None:
        self._providers[key] = provider

    def unbind(self, key: type) -> None:
        self._providers.pop(key, None)

    def has(self, key: Any) -> bool:
        return key in self._providers

    def provider_for(self, key: type) -> Callable[[], Any]:
        return self._providers[key]

    @contextmanager
    def scope(self) -> Iterator[Scope]:
        with ExitStack() as stack:
            yield Scope(self, stack)


container = Container()
container.bind(Session, get_db)
