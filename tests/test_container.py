import pytest

from frontier_actions.actions.container import Container
from frontier_actions.actions.errors import ResolutionError


class Clock:
    pass


class Mailer:
    def __init__(self):
        self.closed = False


class Service:
    def __init__(self, clock: Clock, mailer: Mailer, retries: int = 3):
        self.clock = clock
        self.mailer = mailer
        self.retries = retries


class NeedsUnbound:
    def __init__(self, value: str):
        self.value = value


class NeedsSameClockTwice:
    def __init__(self, first: Clock, second: Clock):
        self.first = first
        self.second = second


@pytest.fixture
def di() -> Container:
    di = Container()
    di.bind(Clock, Clock)

    def mailer():
        instance = Mailer()
        try:
            yield instance
        finally:
            instance.closed = True

    di.bind(Mailer, mailer)
    return di


def test_make_satisfies_bound_parameters(di):
    with di.scope() as scope:
        service = scope.make(Service)
        assert isinstance(service.clock, Clock)
        assert isinstance(service.mailer, Mailer)
        assert service.retries == 3


def test_generator_providers_are_closed_with_the_scope(di):
    with di.scope() as scope:
        service = scope.make(Service)
        assert service.mailer.closed is False
    assert service.mailer.closed is True


def test_one_instance_per_type_per_scope(di):
    with di.scope() as scope:
        made = scope.make(NeedsSameClockTwice)
    assert made.first is made.second


def test_separate_scopes_get_separate_instances(di):
    with di.scope() as scope:
        first = scope.make(Service)
    with di.scope() as scope:
        second = scope.make(Service)
    assert first.clock is not second.clock


def test_unbound_required_parameter(di):
    with di.scope() as scope:
        with pytest.raises(ResolutionError, match="value"):
            scope.make(NeedsUnbound)


def test_unbind(di):
    di.unbind(Clock)
    assert not di.has(Clock)
    with di.scope() as scope:
        with pytest.raises(ResolutionError):
            scope.make(Service)


def test_class_without_init(di):
    with di.scope() as scope:
        assert isinstance(scope.make(Clock), Clock)
