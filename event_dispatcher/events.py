from event_dispatcher.contracts import EventContract


class NullEvent(EventContract):
    """An event that carries no data. Useful for wiring checks and tests."""

    def get_name(self) -> str:
        return "null-event"
