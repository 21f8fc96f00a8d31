"""SynchronizedEventBroker — EventBroker guarded by one re-entrant lock."""
from __future__ import annotations

import functools
import threading
from typing import Any, Callable, TypeVar

from event_broker.broker.broker import EventBroker

F = TypeVar("F", bound=Callable[..., Any])


def _locked(method: F) -> F:
    @functools.wraps(method)
    def wrapper(self: "SynchronizedEventBroker", *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper  # type: ignore[return-value]


class SynchronizedEventBroker(EventBroker):
    """Thread-safe variant for hosts that publish from several threads.

    The lock is held for the whole dispatch cascade; it is re-entrant so
    handlers can publish or read data from inside a callback. A
    prepare/publish pair is only atomic when the caller wraps both in
    :meth:`atomic`.

    Example::

        with broker.atomic():
            broker.prepare_for_next_event("health", 100)
            broker.publish("Updated")
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._lock = threading.RLock()

    def atomic(self) -> threading.RLock:
        """The broker lock, usable as a context manager around several calls."""
        return self._lock

    subscribe = _locked(EventBroker.subscribe)
    unsubscribe = _locked(EventBroker.unsubscribe)
    publish = _locked(EventBroker.publish)
    prepare_for_next_event = _locked(EventBroker.prepare_for_next_event)
    get_invokable_data = _locked(EventBroker.get_invokable_data)
    clarify_invocation_data = _locked(EventBroker.clarify_invocation_data)
    remove_invokable_data = _locked(EventBroker.remove_invokable_data)
    close = _locked(EventBroker.close)


__all__ = ["SynchronizedEventBroker"]
