"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── InvariantViolationError
    │   ├── ValidationError
    │   └── ConflictError
    │       └── DuplicateEntryError
    └── ApplicationError     (application.py)
"""

from event_broker.kernel.errors.application import ApplicationError
from event_broker.kernel.errors.base import BaseError
from event_broker.kernel.errors.domain import (
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
