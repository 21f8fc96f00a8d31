"""Invocation identifiers."""

from __future__ import annotations

from typing import Final, NewType

from event_broker.kernel.errors.domain import InvariantViolationError

InvocationId = NewType("InvocationId", int)

#: Counter value before the first publish; never handed to a handler.
INVOCATION_ID_SEED: Final[InvocationId] = InvocationId(1)

#: Upper bound of the signed 64-bit identifier space.
MAX_INVOCATION_ID: Final[InvocationId] = InvocationId(2**63 - 1)


def successor(invocation_id: int) -> InvocationId:
    """Return the identifier that follows *invocation_id*.

    Raises:
        InvariantViolationError: when the 64-bit identifier space is exhausted.
    """
    if invocation_id >= MAX_INVOCATION_ID:
        raise InvariantViolationError(
            "Invocation identifier space exhausted",
            detail={"invocation_id": invocation_id},
        )
    return InvocationId(invocation_id + 1)


__all__ = ["INVOCATION_ID_SEED", "InvocationId", "MAX_INVOCATION_ID", "successor"]
