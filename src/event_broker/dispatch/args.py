"""Event arguments handed to subscribers."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Final


@dataclasses.dataclass(frozen=True, slots=True)
class EmptyData:
    """Payload published when an event carries no message."""


#: Shared instance published by ``EventBroker.publish(name)``.
EMPTY: Final[EmptyData] = EmptyData()


@dataclasses.dataclass(frozen=True, slots=True)
class EventArgs:
    """One dispatch of a named event.

    Only the primary ``message`` travels here; tagged payloads are fetched
    from the broker's data store with ``invocation_id``.
    """

    name: str
    invocation_id: int
    message: Any = EMPTY


#: Type alias for a subscriber callable.
Handler = Callable[[EventArgs], object]

__all__ = ["EMPTY", "EmptyData", "EventArgs", "Handler"]
