from .contracts import DispatcherContract, EventContract, ListenerContract
from .dispatcher import Dispatcher
from .events import NullEvent
from .exceptions import (
    DispatcherError,
    EventNotFoundError,
    ListenerResolutionError,
    ListenerValidationError,
    RegistrationLoadError,
)
from .listeners import NullListener
from .resolver import ListenerResolver

__all__ = [
    "Dispatcher",
    "DispatcherContract",
    "DispatcherError",
    "EventContract",
    "EventNotFoundError",
    "ListenerContract",
    "ListenerResolutionError",
    "ListenerResolver",
    "ListenerValidationError",
    "NullEvent",
    "NullListener",
    "RegistrationLoadError",
]
