"""Observability – structured logging for the broker."""

from event_broker.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
