import os

import pytest
from event_dispatcher.dispatcher import Dispatcher
from event_dispatcher.resolver import ListenerResolver

from tests.helpers.stubs import (
    AbstractListener,
    Boom,
    CannotInstantiate,
    CountingListener,
    Echo,
    FailableClass,
    ReturnA,
    ReturnB,
)


@pytest.fixture(autouse=True)
def restore_environment():
    """AUTOUSE: Restores os.environ after each test so settings tests cannot leak variables."""
    original_environ = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_environ)


@pytest.fixture
def resolver() -> ListenerResolver:
    """A resolver that knows the stub listeners by their short names."""
    return ListenerResolver(
        {
            "Echo": Echo,
            "ReturnA": ReturnA,
            "ReturnB": ReturnB,
            "Boom": Boom,
            "FailableClass": FailableClass,
            "CannotInstantiate": CannotInstantiate,
            "AbstractListener": AbstractListener,
            "CountingListener": CountingListener,
        }
    )


@pytest.fixture
def dispatcher(resolver) -> Dispatcher:
    return Dispatcher.make(resolver=resolver)
