"""A multicast event that calls each subscribed handler once."""

from __future__ import annotations

from typing import Any, Callable, List

Handler = Callable[..., Any]


class Event:
    """Holds distinct handlers and calls them in subscription order.

    Handlers are compared with ``==``, so the same function, or the same
    method bound to the same object, is only subscribed once.
    """

    def __init__(self) -> None:
        self._handlers: List[Handler] = []

    def subscribe(self, handler: Handler) -> None:
        """Add a handler unless an equal one is already subscribed."""
        if handler not in self._handlers:
            self._handlers.append(handler)

    def unsubscribe(self, handler: Handler) -> None:
        """Remove an equal handler if one is subscribed."""
        try:
            self._handlers.remove(handler)
        except ValueError:
            pass

    def __iadd__(self, handler: Handler) -> Event:
        self.subscribe(handler)
        return self

    def __isub__(self, handler: Handler) -> Event:
        self.unsubscribe(handler)
        return self

    def __call__(self, *args: Any) -> None:
        for handler in list(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, handler: object) -> bool:
        return handler in self._handlers