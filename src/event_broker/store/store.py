"""Invocation data store — data bags keyed by invocation identifier."""
from __future__ import annotations

from typing import Any, TypeVar

from event_broker.kernel.errors import DuplicateEntryError
from event_broker.kernel.types import Nothing, Option, Some
from event_broker.observability.logging import get_logger
from event_broker.store.bag import DataBag, EntryKey
from event_broker.store.lifetime import DataLifetime

T = TypeVar("T")
logger = get_logger(__name__)


class InvocationDataStore:
    """Create, populate, query, amend and destroy per-invocation data bags.

    A bag is created lazily by the first :meth:`stage` for an invocation and
    keeps the lifetime that call requested. Reads never create bags and
    report absence as :class:`~event_broker.kernel.types.Nothing`.

    Example::

        store = InvocationDataStore()
        store.stage(2, int, "health", 100, DataLifetime.DELETE_AFTER_USE)
        store.read(2, int, "health")   # Some(100), bag is now gone
        store.read(2, int, "health")   # Nothing
    """

    def __init__(self) -> None:
        self._bags: dict[int, DataBag] = {}

    def stage(
        self,
        invocation_id: int,
        data_type: type,
        tag: str,
        value: Any,
        lifetime: DataLifetime | str = DataLifetime.DELETE_BY_COMMAND,
    ) -> None:
        """Insert *value* under ``(data_type, tag)`` for *invocation_id*.

        Raises:
            DuplicateEntryError: the key is already occupied; nothing is mutated.
            ValidationError: *value* is not an instance of *data_type*, or
                *lifetime* names no policy. An existing bag keeps its own
                policy but the argument is still checked.
        """
        policy = DataLifetime.parse(lifetime)
        key = EntryKey(data_type, tag)
        bag = self._bags.get(invocation_id)
        if bag is None:
            bag = DataBag(invocation_id, policy)
            bag.push(key, value)
            self._bags[invocation_id] = bag
            logger.debug(
                "broker.data.staged",
                invocation_id=invocation_id,
                key=str(key),
                lifetime=bag.lifetime.value,
            )
            return

        try:
            bag.push(key, value)
        except DuplicateEntryError:
            logger.warning("broker.data.duplicate_entry", invocation_id=invocation_id, key=str(key))
            raise
        logger.debug("broker.data.appended", invocation_id=invocation_id, key=str(key))

    def read(self, invocation_id: int, data_type: type[T], tag: str = "") -> Option[T]:
        """Return the value under ``(data_type, tag)`` or ``Nothing()``.

        A successful read from a ``DELETE_AFTER_USE`` bag destroys the bag.
        """
        bag = self._bags.get(invocation_id)
        if bag is None:
            logger.debug("broker.data.read", invocation_id=invocation_id, tag=tag, found=False)
            return Nothing()

        result = bag.pull(EntryKey(data_type, tag))
        logger.debug(
            "broker.data.read", invocation_id=invocation_id, tag=tag, found=result.is_some()
        )
        if result.is_some() and bag.lifetime is DataLifetime.DELETE_AFTER_USE:
            del self._bags[invocation_id]
            logger.debug("broker.data.discarded", invocation_id=invocation_id)
        return result

    def amend(self, invocation_id: int, data_type: type, tag: str, value: Any) -> bool:
        """Overwrite (or add) an entry in an existing bag; missing bags are left alone."""
        bag = self._bags.get(invocation_id)
        if bag is None:
            logger.debug("broker.data.amend_skipped", invocation_id=invocation_id, tag=tag)
            return False
        key = EntryKey(data_type, tag)
        bag.put(key, value)
        logger.debug("broker.data.amended", invocation_id=invocation_id, key=str(key))
        return True

    def remove(self, invocation_id: int) -> bool:
        """Destroy the bag only when its lifetime is ``DELETE_BY_COMMAND``."""
        bag = self._bags.get(invocation_id)
        if bag is None or bag.lifetime is not DataLifetime.DELETE_BY_COMMAND:
            logger.debug(
                "broker.data.removed",
                invocation_id=invocation_id,
                removed=False,
                lifetime=bag.lifetime.value if bag is not None else None,
            )
            return False
        del self._bags[invocation_id]
        logger.debug("broker.data.removed", invocation_id=invocation_id, removed=True)
        return True

    def lifetime_of(self, invocation_id: int) -> Option[DataLifetime]:
        bag = self._bags.get(invocation_id)
        return Nothing() if bag is None else Some(bag.lifetime)

    def keys(self, invocation_id: int) -> frozenset[EntryKey]:
        bag = self._bags.get(invocation_id)
        return frozenset() if bag is None else bag.keys()

    def clear(self) -> None:
        """Tear the store down, dropping every bag regardless of lifetime."""
        count = len(self._bags)
        self._bags.clear()
        logger.debug("broker.store.cleared", bags=count)

    def __contains__(self, invocation_id: object) -> bool:
        return invocation_id in self._bags

    def __len__(self) -> int:
        return len(self._bags)


__all__ = ["InvocationDataStore"]
