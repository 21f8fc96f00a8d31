"""Broker — publish/prepare/retrieve surface over the store and dispatch table."""

from event_broker.broker.broker import EventBroker
from event_broker.broker.factory import create_broker
from event_broker.broker.synchronized import SynchronizedEventBroker

__all__ = ["EventBroker", "SynchronizedEventBroker", "create_broker"]
