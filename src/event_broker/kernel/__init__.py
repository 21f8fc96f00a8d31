"""Kernel – framework-agnostic building blocks shared by every layer."""

from event_broker.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    DuplicateEntryError,
    InvariantViolationError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "DuplicateEntryError",
    "InvariantViolationError",
    "ValidationError",
]
