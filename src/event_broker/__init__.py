"""
event_broker – in-process event broker with an invocation-scoped data store.

Import path convention::

    from event_broker.broker import EventBroker
    from event_broker.store import DataLifetime, InvocationDataStore
    from event_broker.dispatch import EventArgs
    from event_broker.kernel.errors import DuplicateEntryError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
