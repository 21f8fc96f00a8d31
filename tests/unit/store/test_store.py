"""Unit tests for InvocationDataStore."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from event_broker.kernel.errors import DuplicateEntryError, ValidationError
from event_broker.kernel.types import Nothing, Some
from event_broker.store import DataLifetime, EntryKey, InvocationDataStore


# ---------------------------------------------------------------------------
# stage
# ---------------------------------------------------------------------------


class TestStage:
    def test_creates_bag_lazily(self, store: InvocationDataStore) -> None:
        assert 2 not in store
        store.stage(2, int, "hp", 100)
        assert 2 in store
        assert len(store) == 1

    def test_default_lifetime_is_delete_by_command(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "", 1)
        assert store.lifetime_of(2) == Some(DataLifetime.DELETE_BY_COMMAND)

    def test_first_stage_fixes_lifetime(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "a", 1, DataLifetime.DO_NOT_DELETE)
        store.stage(2, int, "b", 2, DataLifetime.DELETE_AFTER_USE)
        assert store.lifetime_of(2) == Some(DataLifetime.DO_NOT_DELETE)

    def test_lifetime_accepts_name(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "", 1, "delete_after_use")
        assert store.lifetime_of(2) == Some(DataLifetime.DELETE_AFTER_USE)

    def test_unknown_lifetime_rejected_on_new_bag(self, store: InvocationDataStore) -> None:
        with pytest.raises(ValidationError):
            store.stage(2, int, "", 1, "forever")
        assert 2 not in store

    def test_unknown_lifetime_rejected_on_existing_bag(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "a", 1)
        with pytest.raises(ValidationError):
            store.stage(2, int, "b", 2, "forever")
        assert store.keys(2) == frozenset({EntryKey(int, "a")})

    def test_duplicate_key_raises(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "hp", 100)
        with pytest.raises(DuplicateEntryError):
            store.stage(2, int, "hp", 200)

    def test_duplicate_does_not_mutate(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "hp", 100)
        with pytest.raises(DuplicateEntryError):
            store.stage(2, int, "hp", 200)
        assert store.read(2, int, "hp") == Some(100)
        assert store.keys(2) == frozenset({EntryKey(int, "hp")})

    def test_same_type_distinct_tags(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "hp", 100)
        store.stage(2, int, "mana", 40)
        assert store.read(2, int, "hp") == Some(100)
        assert store.read(2, int, "mana") == Some(40)

    def test_same_tag_distinct_types(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "x", 1)
        store.stage(2, str, "x", "one")
        assert store.read(2, int, "x") == Some(1)
        assert store.read(2, str, "x") == Some("one")

    def test_type_mismatch_raises_without_creating_bag(self, store: InvocationDataStore) -> None:
        with pytest.raises(ValidationError):
            store.stage(2, int, "", "not an int")
        assert 2 not in store

    def test_duplicate_logs_warning(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "hp", 100)
        with capture_logs() as logs, pytest.raises(DuplicateEntryError):
            store.stage(2, int, "hp", 200)
        assert logs[-1]["event"] == "broker.data.duplicate_entry"
        assert logs[-1]["log_level"] == "warning"


# ---------------------------------------------------------------------------
# read
# ---------------------------------------------------------------------------


class TestRead:
    def test_missing_bag_is_nothing(self, store: InvocationDataStore) -> None:
        assert store.read(99, int) == Nothing()

    def test_missing_key_is_nothing(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "hp", 100)
        assert store.read(2, int, "mana") == Nothing()
        assert store.read(2, str, "hp") == Nothing()

    def test_stored_none_is_distinguishable(self, store: InvocationDataStore) -> None:
        store.stage(2, type(None), "", None)
        assert store.read(2, type(None)) == Some(None)

    def test_read_does_not_create_bag(self, store: InvocationDataStore) -> None:
        store.read(5, int)
        assert 5 not in store

    def test_delete_after_use_destroys_whole_bag(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "a", 1, DataLifetime.DELETE_AFTER_USE)
        store.stage(2, int, "b", 2)
        assert store.read(2, int, "a") == Some(1)
        assert 2 not in store
        assert store.read(2, int, "a") == Nothing()
        assert store.read(2, int, "b") == Nothing()

    def test_delete_after_use_survives_a_miss(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "a", 1, DataLifetime.DELETE_AFTER_USE)
        assert store.read(2, int, "missing") == Nothing()
        assert store.read(2, int, "a") == Some(1)

    @pytest.mark.parametrize(
        "lifetime", [DataLifetime.DELETE_BY_COMMAND, DataLifetime.DO_NOT_DELETE]
    )
    def test_other_lifetimes_survive_reads(
        self, store: InvocationDataStore, lifetime: DataLifetime
    ) -> None:
        store.stage(2, int, "", 1, lifetime)
        assert store.read(2, int) == Some(1)
        assert store.read(2, int) == Some(1)


# ---------------------------------------------------------------------------
# amend
# ---------------------------------------------------------------------------


class TestAmend:
    def test_overwrites_existing_key(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "hp", 100)
        assert store.amend(2, int, "hp", 50) is True
        assert store.read(2, int, "hp") == Some(50)

    def test_adds_missing_key(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "hp", 100)
        assert store.amend(2, str, "name", "orc") is True
        assert store.read(2, str, "name") == Some("orc")

    def test_missing_bag_is_noop(self, store: InvocationDataStore) -> None:
        assert store.amend(2, int, "hp", 50) is False
        assert 2 not in store

    def test_keeps_lifetime(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "hp", 100, DataLifetime.DO_NOT_DELETE)
        store.amend(2, int, "hp", 1)
        assert store.lifetime_of(2) == Some(DataLifetime.DO_NOT_DELETE)

    def test_type_mismatch_raises(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "hp", 100)
        with pytest.raises(ValidationError):
            store.amend(2, int, "hp", "fifty")
        assert store.read(2, int, "hp") == Some(100)


# ---------------------------------------------------------------------------
# remove / clear
# ---------------------------------------------------------------------------


class TestRemove:
    def test_delete_by_command_removed_once(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "", 1, DataLifetime.DELETE_BY_COMMAND)
        assert store.remove(2) is True
        assert store.remove(2) is False
        assert store.read(2, int) == Nothing()

    def test_do_not_delete_is_kept(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "", 1, DataLifetime.DO_NOT_DELETE)
        assert store.remove(2) is False
        assert store.read(2, int) == Some(1)

    def test_delete_after_use_is_kept(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "", 1, DataLifetime.DELETE_AFTER_USE)
        assert store.remove(2) is False
        assert 2 in store

    def test_missing_bag(self, store: InvocationDataStore) -> None:
        assert store.remove(42) is False

    def test_removes_every_entry(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "a", 1)
        store.stage(2, str, "b", "two")
        store.remove(2)
        assert store.keys(2) == frozenset()

    def test_clear_drops_do_not_delete(self, store: InvocationDataStore) -> None:
        store.stage(2, int, "", 1, DataLifetime.DO_NOT_DELETE)
        store.stage(3, int, "", 1, DataLifetime.DELETE_AFTER_USE)
        store.clear()
        assert len(store) == 0
        assert store.lifetime_of(2) == Nothing()
