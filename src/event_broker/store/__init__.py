"""Invocation data store — public re-export surface."""

from event_broker.store.bag import DataBag, EntryKey
from event_broker.store.lifetime import DataLifetime
from event_broker.store.store import InvocationDataStore

__all__ = ["DataBag", "DataLifetime", "EntryKey", "InvocationDataStore"]
