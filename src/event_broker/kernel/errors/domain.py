"""Domain errors — broker rule and invariant violations."""

from __future__ import annotations

from typing import Any

from event_broker.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a broker rule / invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A broker invariant was violated."""

    default_code = "invariant_violation"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class ConflictError(DomainError):
    """The operation conflicts with existing state."""

    default_code = "conflict"


class DuplicateEntryError(ConflictError):
    """A ``(type, tag)`` key is already occupied in an invocation's data bag.

    Staging the same key twice for one invocation is a caller programming
    error; the failed call leaves the store untouched.
    """

    default_code = "duplicate_entry"

    def __init__(
        self,
        invocation_id: int,
        data_type: type,
        tag: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Cannot stage data of type {data_type.__qualname__!r} with tag {tag!r} "
            f"for invocation {invocation_id}: entry already exists",
            detail={
                "invocation_id": invocation_id,
                "data_type": data_type.__qualname__,
                "tag": tag,
            },
            **kwargs,
        )
        self.invocation_id = invocation_id
        self.data_type = data_type
        self.tag = tag


__all__ = [
    "ConflictError",
    "DomainError",
    "DuplicateEntryError",
    "InvariantViolationError",
    "ValidationError",
]
