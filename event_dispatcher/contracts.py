# Interfaces for the event dispatcher.

import abc
from typing import Any, Dict, List, Mapping, Sequence

from pydantic import BaseModel, ConfigDict


class EventContract(BaseModel, abc.ABC):
    """Abstract base for anything that can be dispatched.

    An event's only obligation is to name itself. The name is the key the
    dispatcher looks listeners up by, and the event instance itself is passed to
    each listener as the payload. Subclasses may declare pydantic fields to
    carry data.
    """

    model_config = ConfigDict(frozen=True)

    @abc.abstractmethod
    def get_name(self) -> str:
        """Return the stable identifying name of this event."""
        raise NotImplementedError(f"Event {self.__class__.__name__} must implement the get_name method.")


class ListenerContract(abc.ABC):
    """Abstract base for event listeners.

    Listeners are instantiated fresh for every dispatch, so implementations must
    be constructible without arguments.
    """

    @abc.abstractmethod
    def handle(self, event: EventContract) -> Any:
        """
        Handle a dispatched event.

        Args:
            event: The event being dispatched.

        Returns:
            Any value. The dispatcher records it in its debug log when dispatching with debug enabled.
        """
        raise NotImplementedError(f"Listener {self.__class__.__name__} must implement the handle method.")


class DispatcherContract(abc.ABC):
    """Interface of an event registry that dispatches events to listeners."""

    @abc.abstractmethod
    def add(self, name: str, listeners: Sequence[str]) -> None: ...

    @abc.abstractmethod
    def append(self, name: str, listeners: Sequence[str]) -> None: ...

    @abc.abstractmethod
    def remove(self, name: str, listener: str) -> None: ...

    @abc.abstractmethod
    def remove_all(self, name: str) -> None: ...

    @abc.abstractmethod
    def has(self, name: str) -> bool: ...

    @abc.abstractmethod
    def has_listener(self, name: str, listener: str) -> bool: ...

    @abc.abstractmethod
    def listeners(self) -> Dict[str, List[str]]: ...

    @abc.abstractmethod
    def get_listeners_for_event(self, name: str) -> List[str]: ...

    @abc.abstractmethod
    def dispatch(self, event: EventContract, debug: bool = False) -> List[Any]: ...

    @abc.abstractmethod
    def log(self) -> Mapping[str, List[Any]]: ...
