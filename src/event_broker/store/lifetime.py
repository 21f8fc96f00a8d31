"""Data lifetime policies for invocation data bags."""
from __future__ import annotations

from enum import Enum

from event_broker.kernel.errors import ValidationError


class DataLifetime(str, Enum):
    """How and when a data bag is destroyed.

    The policy is fixed by whichever stage call creates the bag.
    """

    DELETE_AFTER_USE = "DELETE_AFTER_USE"
    DELETE_BY_COMMAND = "DELETE_BY_COMMAND"
    DO_NOT_DELETE = "DO_NOT_DELETE"

    @classmethod
    def parse(cls, value: "DataLifetime | str") -> "DataLifetime":
        """Accept a member or its name, case-insensitively.

        Raises:
            ValidationError: *value* names no lifetime.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValidationError(
                f"Unknown data lifetime {value!r}",
                errors=[{"field": "lifetime", "value": str(value), "allowed": [m.value for m in cls]}],
            ) from None


__all__ = ["DataLifetime"]
