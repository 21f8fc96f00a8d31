"""EventBroker — invocation-id allocation, publish and data retrieval."""
from __future__ import annotations

from typing import Any, TypeVar

from event_broker.dispatch import EMPTY, DispatchTable, EventArgs, Handler
from event_broker.kernel.types import INVOCATION_ID_SEED, InvocationId, Option, successor
from event_broker.observability.logging import get_logger
from event_broker.store import DataLifetime, InvocationDataStore

T = TypeVar("T")
logger = get_logger(__name__)


class EventBroker:
    """In-process event broker with an invocation-scoped data store.

    Every :meth:`publish` that reaches at least one subscriber allocates a
    fresh invocation id, stages the message under ``(type(message), "")``
    and calls the handlers synchronously with :class:`EventArgs`. Extra
    payloads ride along by being staged for the *next* id beforehand.

    Example::

        broker = EventBroker()
        broker.subscribe("Updated", on_updated)
        broker.prepare_for_next_event("health", 100)
        broker.publish("Updated")

        def on_updated(args: EventArgs) -> None:
            health = broker.get_invokable_data(args.invocation_id, int, "health")

    .. note::
       Preparing data under the empty tag with the same type as the message
       later published collides on ``(type, "")`` and raises
       :class:`~event_broker.kernel.errors.DuplicateEntryError` before any
       handler runs.
    """

    def __init__(
        self,
        store: InvocationDataStore | None = None,
        table: DispatchTable | None = None,
        *,
        default_lifetime: DataLifetime | str = DataLifetime.DELETE_BY_COMMAND,
    ) -> None:
        self._store = store if store is not None else InvocationDataStore()
        self._table = table if table is not None else DispatchTable()
        self._default_lifetime = DataLifetime.parse(default_lifetime)
        self._current_id: InvocationId = INVOCATION_ID_SEED

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def store(self) -> InvocationDataStore:
        return self._store

    @property
    def table(self) -> DispatchTable:
        return self._table

    @property
    def default_lifetime(self) -> DataLifetime:
        return self._default_lifetime

    @property
    def current_invocation_id(self) -> InvocationId:
        """Id of the most recent publish (the seed before any publish)."""
        return self._current_id

    @property
    def next_invocation_id(self) -> InvocationId:
        """Id the next reaching publish will allocate."""
        return successor(self._current_id)

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, name: str, handler: Handler) -> None:
        self._table.subscribe(name, handler)

    def unsubscribe(self, name: str, handler: Handler) -> bool:
        return self._table.unsubscribe(name, handler)

    # ------------------------------------------------------------------
    # Publishing
    # ------------------------------------------------------------------

    def publish(
        self,
        name: str,
        message: Any = EMPTY,
        lifetime: DataLifetime | str | None = None,
        *,
        data_type: type | None = None,
    ) -> InvocationId | None:
        """Publish *name* and return the allocated invocation id.

        Returns ``None`` without touching the counter or the store when
        nobody is subscribed. An unknown *lifetime* raises
        ``ValidationError`` before an id is allocated.
        """
        if not self._table.has_subscribers(name):
            logger.debug("broker.event.skipped", event_name=name)
            return None

        policy = self._resolve(lifetime)
        invocation_id = successor(self._current_id)
        self._current_id = invocation_id
        self._store.stage(invocation_id, data_type or type(message), "", message, policy)
        args = EventArgs(name=name, invocation_id=invocation_id, message=message)
        count = self._table.dispatch(name, args)
        logger.debug("broker.event.published", event_name=name, invocation_id=invocation_id, handlers=count)
        return invocation_id

    def prepare_for_next_event(
        self,
        tag: str,
        data: Any,
        lifetime: DataLifetime | str | None = None,
        *,
        data_type: type | None = None,
    ) -> None:
        """Stage *data* for the invocation the next publish will allocate.

        No other publish may happen between this call and the one it is
        meant for, or the data attaches to the wrong invocation.

        Untagged data goes under the empty tag and is read back the same
        way::

            broker.prepare_for_next_event("", Position(3, 4))
            broker.get_invokable_data(args.invocation_id, Position)

        The empty tag is also where :meth:`publish` puts the message, so
        untagged data must not share the message's type.
        """
        self._store.stage(
            self.next_invocation_id,
            data_type or type(data),
            tag,
            data,
            self._resolve(lifetime),
        )

    # ------------------------------------------------------------------
    # Data access
    # ------------------------------------------------------------------

    def get_invokable_data(self, invocation_id: int, data_type: type[T], tag: str = "") -> Option[T]:
        return self._store.read(invocation_id, data_type, tag)

    def clarify_invocation_data(
        self,
        invocation_id: int,
        tag: str,
        data: Any,
        *,
        data_type: type | None = None,
    ) -> None:
        """Overwrite an entry of an already-staged invocation; no bag, no effect."""
        self._store.amend(invocation_id, data_type or type(data), tag, data)

    def remove_invokable_data(self, invocation_id: int, tag: str = "") -> bool:
        """Remove the whole bag for *invocation_id*.

        *tag* does not narrow the removal; every entry of the invocation goes.
        """
        removed = self._store.remove(invocation_id)
        logger.debug("broker.data.remove_requested", invocation_id=invocation_id, tag=tag, removed=removed)
        return removed

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Drop every subscription and every bag. The id counter keeps going."""
        self._table.clear()
        self._store.clear()

    def __enter__(self) -> "EventBroker":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _resolve(self, lifetime: DataLifetime | str | None) -> DataLifetime:
        return self._default_lifetime if lifetime is None else DataLifetime.parse(lifetime)


__all__ = ["EventBroker"]
