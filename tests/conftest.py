"""Shared fixtures for the event-broker unit tests."""

from __future__ import annotations

import logging
from typing import Iterator

import pytest
import structlog

from event_broker.broker import EventBroker
from event_broker.store import InvocationDataStore


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Undo any structlog / root-logger configuration a test applied."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def store() -> InvocationDataStore:
    return InvocationDataStore()


@pytest.fixture
def broker() -> EventBroker:
    return EventBroker()
