"""Dispatch table — ordered subscriber lists keyed by event name."""
from __future__ import annotations

from event_broker.dispatch.args import EventArgs, Handler
from event_broker.observability.logging import get_logger

logger = get_logger(__name__)


class DispatchTable:
    """Maps event names to handlers in registration order.

    A name only has a list while at least one handler is registered, so
    :meth:`has_subscribers` and list existence are the same question.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = {}

    def subscribe(self, name: str, handler: Handler) -> None:
        """Append *handler*; subscribing twice means two calls per dispatch."""
        if not callable(handler):
            raise TypeError(f"handler must be callable, got {type(handler).__name__}")
        self._handlers.setdefault(name, []).append(handler)
        logger.debug("broker.handler.subscribed", event_name=name, handlers=len(self._handlers[name]))

    def unsubscribe(self, name: str, handler: Handler) -> bool:
        """Remove the most recently added handler equal to *handler*.

        Unknown names and handlers are ignored.
        """
        handlers = self._handlers.get(name)
        if not handlers:
            return False
        for index in range(len(handlers) - 1, -1, -1):
            if handlers[index] == handler:
                del handlers[index]
                break
        else:
            return False
        if not handlers:
            del self._handlers[name]
        logger.debug("broker.handler.unsubscribed", event_name=name, handlers=len(handlers))
        return True

    def dispatch(self, name: str, args: EventArgs) -> int:
        """Call every handler registered for *name* right now, in order.

        The list is snapshotted first, so handlers that (un)subscribe only
        affect later dispatches. Handler exceptions propagate to the caller.
        """
        snapshot = tuple(self._handlers.get(name, ()))
        for handler in snapshot:
            handler(args)
        return len(snapshot)

    def has_subscribers(self, name: str) -> bool:
        return bool(self._handlers.get(name))

    def handlers(self, name: str) -> tuple[Handler, ...]:
        return tuple(self._handlers.get(name, ()))

    def event_names(self) -> frozenset[str]:
        return frozenset(self._handlers)

    def clear(self, name: str | None = None) -> None:
        """Drop the handlers for *name*, or for every event when omitted."""
        if name is None:
            self._handlers.clear()
        else:
            self._handlers.pop(name, None)


__all__ = ["DispatchTable"]
