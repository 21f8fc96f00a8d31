"""Kernel value types — public re-export surface.

Modules:
  ids.py    — InvocationId and the invocation counter bounds
  option.py — Some, Nothing, Option
"""

from event_broker.kernel.types.ids import (
    INVOCATION_ID_SEED,
    MAX_INVOCATION_ID,
    InvocationId,
    successor,
)
from event_broker.kernel.types.option import Nothing, Option, Some

__all__ = [
    "INVOCATION_ID_SEED",
    "InvocationId",
    "MAX_INVOCATION_ID",
    "Nothing",
    "Option",
    "Some",
    "successor",
]
