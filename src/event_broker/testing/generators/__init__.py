"""Testing generators – Hypothesis strategies for broker data."""
from event_broker.testing.generators.strategies import (
    lifetime_strategy,
    payload_strategy,
    tag_strategy,
)

__all__ = ["lifetime_strategy", "payload_strategy", "tag_strategy"]
