"""Observability – structlog configuration and logger helper."""
from event_broker.observability.logging.factory import JsonLoggerFactory
from event_broker.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
