"""Data bag — the typed, tagged values attached to one invocation."""
from __future__ import annotations

import dataclasses
from typing import Any, Iterator

from event_broker.kernel.errors import DuplicateEntryError, ValidationError
from event_broker.kernel.types import Nothing, Option, Some
from event_broker.store.lifetime import DataLifetime


@dataclasses.dataclass(frozen=True, slots=True)
class EntryKey:
    """Composite entry key = (data_type, tag)."""

    data_type: type
    tag: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.data_type, type):
            raise ValidationError(
                f"data_type must be a class, got {self.data_type!r}",
                errors=[{"field": "data_type", "msg": "not a class"}],
            )
        if not isinstance(self.tag, str):
            raise ValidationError(
                f"tag must be a string, got {type(self.tag).__name__}",
                errors=[{"field": "tag", "msg": "not a string"}],
            )

    def check(self, value: Any) -> None:
        """Raise :class:`ValidationError` unless *value* is a ``data_type`` instance."""
        if not isinstance(value, self.data_type):
            raise ValidationError(
                f"Value of type {type(value).__qualname__!r} cannot be stored as "
                f"{self.data_type.__qualname__!r}",
                errors=[{"field": "value", "msg": "type mismatch", "tag": self.tag}],
            )

    def __str__(self) -> str:
        return f"{self.data_type.__qualname__}:{self.tag}"


class DataBag:
    """Values staged for one invocation, governed by a single lifetime."""

    __slots__ = ("_entries", "_invocation_id", "_lifetime")

    def __init__(self, invocation_id: int, lifetime: DataLifetime) -> None:
        self._invocation_id = invocation_id
        self._lifetime = lifetime
        self._entries: dict[EntryKey, Any] = {}

    @property
    def invocation_id(self) -> int:
        return self._invocation_id

    @property
    def lifetime(self) -> DataLifetime:
        return self._lifetime

    def pull(self, key: EntryKey) -> Option[Any]:
        if key in self._entries:
            return Some(self._entries[key])
        return Nothing()

    def push(self, key: EntryKey, value: Any) -> None:
        """Insert a new entry; occupied keys raise :class:`DuplicateEntryError`."""
        key.check(value)
        if key in self._entries:
            raise DuplicateEntryError(self._invocation_id, key.data_type, key.tag)
        self._entries[key] = value

    def put(self, key: EntryKey, value: Any) -> None:
        """Insert or overwrite an entry."""
        key.check(value)
        self._entries[key] = value

    def keys(self) -> frozenset[EntryKey]:
        return frozenset(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[EntryKey]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"DataBag(invocation_id={self._invocation_id}, "
            f"lifetime={self._lifetime.value}, entries={len(self._entries)})"
        )


__all__ = ["DataBag", "EntryKey"]
