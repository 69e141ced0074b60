"""In-process event registry that dispatches events to listeners synchronously."""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

from psygnal import Signal

from event_dispatcher.contracts import DispatcherContract, EventContract
from event_dispatcher.exceptions import DispatcherError, EventNotFoundError, ListenerValidationError
from event_dispatcher.resolver import ListenerResolver

logger = logging.getLogger(__name__)


class Dispatcher(DispatcherContract):
    """Maps event names to ordered lists of listener identifiers.

    Listener identifiers are resolved to classes through a ListenerResolver. Listeners
    are checked against ListenerContract when they are added or appended, and checked for
    zero-argument instantiability when an event is dispatched. A fresh listener instance
    is created for every invocation.

    Typical usage:
        dispatcher = Dispatcher.make()
        dispatcher.add("null-event", ["NullListener"])
        dispatcher.dispatch(NullEvent(), debug=True)
        dispatcher.log()  # {"null-event": ["null-event"]}

    Attributes:
        dispatched: Signal emitted with (event_name, results) after a dispatch completes.
    """

    dispatched = Signal(str, list)

    def __init__(
        self,
        listeners: Optional[Mapping[str, Sequence[str]]] = None,
        resolver: Optional[ListenerResolver] = None,
    ) -> None:
        self._resolver = resolver or ListenerResolver()
        self._listeners: Dict[str, List[str]] = {name: list(ids) for name, ids in (listeners or {}).items()}
        self._log: Dict[str, List[Any]] = {}

    @classmethod
    def make(
        cls,
        listeners: Optional[Mapping[str, Sequence[str]]] = None,
        *,
        resolver: Optional[ListenerResolver] = None,
        strict: bool = False,
    ) -> "Dispatcher":
        """
        Make a new Dispatcher seeded with the given registrations.

        Args:
            listeners: Mapping of event name to listener identifiers, stored as given.
            resolver: Resolver for listener identifiers. A default resolver is used if omitted.
            strict: Validate seeded event names and listeners the way `add` does. When False,
                seeded listeners are only checked when dispatched.

        Raises:
            ListenerValidationError: In strict mode, if a name or listener fails validation.
            ListenerResolutionError: In strict mode, if a listener cannot be resolved.
        """
        dispatcher = cls(listeners=None, resolver=resolver)
        seed = {name: list(ids) for name, ids in (listeners or {}).items()}
        if strict:
            for name, ids in seed.items():
                dispatcher._check_name(name)
                dispatcher._check_listeners(name, ids)
        dispatcher._listeners = seed
        logger.debug(f"Dispatcher created with {len(dispatcher._listeners)} registered events (strict={strict})")
        return dispatcher

    @property
    def resolver(self) -> ListenerResolver:
        return self._resolver

    def add(self, name: str, listeners: Sequence[str]) -> None:
        """Register an event, replacing any listeners it already had.

        Raises:
            ListenerValidationError: If the name is empty or a listener does not implement ListenerContract.
            ListenerResolutionError: If a listener cannot be resolved.
        """
        self._check_name(name)
        ids = list(listeners)
        self._check_listeners(name, ids)
        self._listeners[name] = ids
        logger.debug(f"Registered event '{name}' with listeners {ids}")

    def append(self, name: str, listeners: Sequence[str]) -> None:
        """Append listeners onto an already registered event.

        The whole batch is validated before anything is appended.

        Raises:
            EventNotFoundError: If the event has not been registered.
            ListenerValidationError: If a listener does not implement ListenerContract.
            ListenerResolutionError: If a listener cannot be resolved.
        """
        self._check_event(name)
        ids = list(listeners)
        self._check_listeners(name, ids)
        self._listeners[name].extend(ids)
        logger.debug(f"Appended listeners {ids} to event '{name}'")

    def remove(self, name: str, listener: str) -> None:
        """Remove every occurrence of a listener from an event.

        The event stays registered even if no listeners remain.

        Raises:
            EventNotFoundError: If the event has not been registered.
            ListenerValidationError: If the listener is not registered for the event.
        """
        if not self.has_listener(name, listener):
            raise ListenerValidationError(
                f"Listener [{listener}] has not been registered for event [{name}].",
                event_name=name,
                listener=listener,
            )
        self._listeners[name] = [item for item in self._listeners[name] if item != listener]
        logger.debug(f"Removed listener [{listener}] from event '{name}'")

    def remove_all(self, name: str) -> None:
        """Remove an event and all of its listeners.

        Raises:
            EventNotFoundError: If the event has not been registered.
        """
        self._check_event(name)
        del self._listeners[name]
        logger.debug(f"Removed event '{name}'")

    def has(self, name: str) -> bool:
        """Check if an event has been registered. Unhashable names are never registered."""
        try:
            return name in self._listeners
        except TypeError:
            return False

    def has_listener(self, name: str, listener: str) -> bool:
        """Check if a listener is registered for an event.

        Raises:
            EventNotFoundError: If the event has not been registered.
        """
        self._check_event(name)
        return listener in self._listeners[name]

    def listeners(self) -> Dict[str, List[str]]:
        """Return a copy of every registered event and its listeners."""
        return {name: list(ids) for name, ids in self._listeners.items()}

    def get_listeners_for_event(self, name: str) -> List[str]:
        """Return a copy of the listeners registered for an event.

        Raises:
            EventNotFoundError: If the event has not been registered.
        """
        self._check_event(name)
        return list(self._listeners[name])

    def dispatch(self, event: EventContract, debug: bool = False) -> List[Any]:
        """
        Dispatch an event to every listener registered under its name, in registration order.

        Each listener is resolved, checked for zero-argument instantiability, instantiated and
        handed the event. Exceptions raised by a listener propagate immediately and the
        remaining listeners are not called.

        Args:
            event: The event to dispatch. Its `get_name()` selects the listeners.
            debug: Append each listener's result to the debug log.

        Returns:
            The results of this dispatch, one per listener.

        Raises:
            EventNotFoundError: If no event is registered under the event's name.
            ListenerValidationError: If a listener cannot be instantiated without arguments.
            ListenerResolutionError: If a listener cannot be resolved.
        """
        name = event.get_name()
        listeners = self.get_listeners_for_event(name)
        logger.info(f"Dispatching event '{name}' to {len(listeners)} listeners (debug={debug})")

        results: List[Any] = []
        for listener in listeners:
            try:
                listener_class = self._resolver.ensure_instantiable(listener)
            except DispatcherError as e:
                e.event_name = name
                raise
            result = listener_class().handle(event)
            results.append(result)
            if debug:
                self._log.setdefault(name, []).append(result)

        self.dispatched.emit(name, list(results))
        return results

    def log(self) -> Dict[str, List[Any]]:
        """Return a copy of the debug log."""
        return {name: list(results) for name, results in self._log.items()}

    def clear_log(self, name: Optional[str] = None) -> None:
        """Clear the debug log, either entirely or for a single event."""
        if name is None:
            self._log.clear()
        else:
            self._log.pop(name, None)

    def __contains__(self, name: object) -> bool:
        return self.has(name)

    def __len__(self) -> int:
        return len(self._listeners)

    def _check_event(self, name: str) -> None:
        if not self.has(name):
            raise EventNotFoundError(
                f"No event has been registered under [{name}], please check your config to see why it was not loaded.",
                event_name=name,
            )

    def _check_name(self, name: str) -> None:
        if not isinstance(name, str) or not name:
            raise ListenerValidationError(f"Event name must be a non-empty string, got {name!r}.", event_name=name)

    def _check_listeners(self, name: str, listeners: Sequence[str]) -> None:
        for listener in listeners:
            try:
                self._resolver.ensure_listener(listener)
            except DispatcherError as e:
                e.event_name = name
                raise
