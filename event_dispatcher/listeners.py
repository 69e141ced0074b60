from typing import Any

from event_dispatcher.contracts import EventContract, ListenerContract


class NullListener(ListenerContract):
    """A listener that does nothing but echo the name of the event it receives."""

    def handle(self, event: EventContract) -> Any:
        return event.get_name()
