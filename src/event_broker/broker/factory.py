"""Broker factory – build a broker from BrokerSettings."""
from __future__ import annotations

from event_broker.broker.broker import EventBroker
from event_broker.broker.synchronized import SynchronizedEventBroker
from event_broker.config.settings import BrokerSettings, load_settings
from event_broker.observability.logging import JsonLoggerFactory, get_logger

logger = get_logger(__name__)


def create_broker(settings: BrokerSettings | None = None) -> EventBroker:
    """Return a broker wired from *settings* (environment when omitted)."""
    settings = settings if settings is not None else load_settings()
    if settings.configure_logging:
        JsonLoggerFactory.configure(settings.level, json=settings.log_json)

    broker_cls = SynchronizedEventBroker if settings.thread_safe else EventBroker
    broker = broker_cls(default_lifetime=settings.lifetime)
    logger.info(
        "broker.created",
        broker=broker_cls.__name__,
        default_lifetime=settings.lifetime.value,
    )
    return broker


__all__ = ["create_broker"]
