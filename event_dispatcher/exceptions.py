# Event Dispatcher Exceptions


class DispatcherError(Exception):
    """Base exception for all event dispatcher errors."""

    def __init__(self, *args, event_name: str | None = None, listener: str | None = None, detail: str | None = None):
        super().__init__(*args)
        self.event_name = event_name
        self.listener = listener
        # Use the first arg as detail if detail kwarg is not provided and args exist
        self.detail = detail or (args[0] if args else None)


class EventNotFoundError(KeyError, DispatcherError):
    """Raised when an operation references an event name that has not been registered."""

    def __init__(self, *args, event_name: str | None = None, listener: str | None = None, detail: str | None = None):
        DispatcherError.__init__(self, *args, event_name=event_name, listener=listener, detail=detail)

    def __str__(self) -> str:
        # KeyError quotes its argument; we want the plain message.
        return str(self.detail) if self.detail is not None else ""


class ListenerValidationError(ValueError, DispatcherError):
    """Raised when a listener or event name fails validation."""

    def __init__(self, *args, event_name: str | None = None, listener: str | None = None, detail: str | None = None):
        DispatcherError.__init__(self, *args, event_name=event_name, listener=listener, detail=detail)


class ListenerResolutionError(LookupError, DispatcherError):
    """Raised when a listener identifier does not resolve to any known class."""

    def __init__(self, *args, event_name: str | None = None, listener: str | None = None, detail: str | None = None):
        DispatcherError.__init__(self, *args, event_name=event_name, listener=listener, detail=detail)


class RegistrationLoadError(ValueError, DispatcherError):
    """Raised when a registration file is missing or malformed."""

    def __init__(self, *args, event_name: str | None = None, listener: str | None = None, detail: str | None = None):
        DispatcherError.__init__(self, *args, event_name=event_name, listener=listener, detail=detail)
