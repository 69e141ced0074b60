from unittest.mock import MagicMock, patch

import pytest
from event_dispatcher.dispatcher import Dispatcher
from event_dispatcher.exceptions import ListenerResolutionError, ListenerValidationError
from event_dispatcher.listeners import NullListener
from event_dispatcher.resolver import DEFAULT_LISTENER_ALIASES, ListenerResolver

from tests.helpers.stubs import AbstractListener, CannotInstantiate, Echo, FailableClass


class KeywordDefaults(NullListener):
    def __init__(self, prefix: str = "", *args, **kwargs):
        self.prefix = prefix


class RequiresKeyword(NullListener):
    def __init__(self, *, prefix: str):
        self.prefix = prefix


def test_default_aliases():
    resolver = ListenerResolver()

    assert resolver.resolve("NullListener") is NullListener
    assert resolver.aliases() == DEFAULT_LISTENER_ALIASES


def test_register_alias():
    resolver = ListenerResolver()
    resolver.register("Echo", Echo)

    assert resolver.resolve("Echo") is Echo


def test_register_alias_overrides_previous():
    resolver = ListenerResolver({"Listener": NullListener})
    resolver.register("Listener", Echo)

    assert resolver.resolve("Listener") is Echo


def test_aliases_returns_copy():
    resolver = ListenerResolver()
    resolver.aliases()["Echo"] = Echo

    with pytest.raises(ListenerResolutionError):
        resolver.resolve("Echo")


@pytest.mark.parametrize("alias, listener_class", [("", Echo), ("Echo", Echo()), ("Echo", "tests.helpers.stubs.Echo")])
def test_register_invalid(alias, listener_class):
    resolver = ListenerResolver()

    with pytest.raises(ListenerValidationError):
        resolver.register(alias, listener_class)


def test_resolve_dotted_path():
    resolver = ListenerResolver()

    assert resolver.resolve("tests.helpers.stubs.Echo") is Echo


def test_alias_takes_precedence_over_import_path():
    resolver = ListenerResolver({"tests.helpers.stubs.Echo": NullListener})

    assert resolver.resolve("tests.helpers.stubs.Echo") is NullListener


def test_resolve_unknown_alias():
    resolver = ListenerResolver()

    with pytest.raises(ListenerResolutionError, match="Unknown listener") as exc_info:
        resolver.resolve("Echo")

    assert exc_info.value.listener == "Echo"
    assert isinstance(exc_info.value, LookupError)


@patch("importlib.import_module")
def test_resolve_import_error(mock_import_module):
    mock_import_module.side_effect = ImportError("No module named 'missing'")
    resolver = ListenerResolver()

    with pytest.raises(ListenerResolutionError, match="Could not import listener module 'missing.module'"):
        resolver.resolve("missing.module.Listener")

    mock_import_module.assert_called_once_with("missing.module")


@patch("importlib.import_module")
def test_resolve_missing_class(mock_import_module):
    mock_import_module.return_value = MagicMock(spec=[])
    resolver = ListenerResolver()

    with pytest.raises(ListenerResolutionError, match="not found in module"):
        resolver.resolve("some.module.Missing")


def test_resolve_non_class_attribute():
    resolver = ListenerResolver()

    with pytest.raises(ListenerResolutionError, match="does not refer to a class"):
        resolver.resolve("tests.helpers.stubs.NOT_A_CLASS")


@pytest.mark.parametrize("identifier", [".Echo", "..helpers.Echo", "tests..helpers.Echo", "tests.helpers.stubs."])
def test_resolve_malformed_dotted_path(identifier):
    resolver = ListenerResolver()

    with pytest.raises(ListenerResolutionError) as exc_info:
        resolver.resolve(identifier)

    assert exc_info.value.listener == identifier


def test_add_malformed_dotted_path_raises_resolution_error():
    dispatcher = Dispatcher.make()

    with pytest.raises(ListenerResolutionError) as exc_info:
        dispatcher.add("Ping", [".Echo"])

    assert exc_info.value.event_name == "Ping"
    assert not dispatcher.has("Ping")


class TestEnsureListener:
    def test_accepts_listener(self):
        resolver = ListenerResolver({"Echo": Echo})

        assert resolver.ensure_listener("Echo") is Echo

    def test_rejects_class_without_contract(self):
        resolver = ListenerResolver({"FailableClass": FailableClass})

        with pytest.raises(ListenerValidationError, match="must implement the ListenerContract"):
            resolver.ensure_listener("FailableClass")

    def test_accepts_non_instantiable_listener(self):
        """The contract check says nothing about construction."""
        resolver = ListenerResolver({"CannotInstantiate": CannotInstantiate, "AbstractListener": AbstractListener})

        assert resolver.ensure_listener("CannotInstantiate") is CannotInstantiate
        assert resolver.ensure_listener("AbstractListener") is AbstractListener


class TestEnsureInstantiable:
    def test_accepts_zero_argument_class(self):
        resolver = ListenerResolver({"Echo": Echo, "KeywordDefaults": KeywordDefaults})

        assert resolver.ensure_instantiable("Echo") is Echo
        assert resolver.ensure_instantiable("KeywordDefaults") is KeywordDefaults

    @pytest.mark.parametrize(
        "listener_class, message",
        [
            (CannotInstantiate, "constructor requires name"),
            (RequiresKeyword, "constructor requires prefix"),
            (AbstractListener, "abstract"),
        ],
    )
    def test_rejects_non_instantiable(self, listener_class, message):
        resolver = ListenerResolver({"Listener": listener_class})

        with pytest.raises(ListenerValidationError, match=message):
            resolver.ensure_instantiable("Listener")

    def test_does_not_require_contract(self):
        resolver = ListenerResolver({"FailableClass": FailableClass})

        assert resolver.ensure_instantiable("FailableClass") is FailableClass
