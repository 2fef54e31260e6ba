import pytest
from mold.core.guard import FieldGuard
from mold.core.store import MergeStore, pick
from mold.errors import InvalidFieldError


def make_store():
    return MergeStore(FieldGuard(public_fields=("name", "email", "age")))


def upper_validator(raw):
    return {key: str(value).upper() for key, value in raw.items()}


class TestMergeStore:
    """Test suite for MergeStore."""

    def test_fill_base_not_tracked(self):
        """Test that base values are stored but not marked changed."""
        store = make_store()
        store.fill_base({"name": "John", "age": "30"}, strict=True)

        assert store.read() == {"name": "John", "age": "30"}
        assert store.changed_keys == ()

    def test_fill_base_overwrites(self):
        """Test that a later base fill overwrites earlier values."""
        store = make_store()
        store.fill_base({"name": "John"}, strict=True)
        store.fill_base({"name": "Jane"}, strict=True)

        assert store.read("name") == "Jane"

    def test_fill_base_strict_keeps_prior_writes(self):
        """Test that a strict failure aborts the fill without rolling back."""
        store = make_store()

        with pytest.raises(InvalidFieldError):
            store.fill_base({"name": "John", "bogus": "x", "age": "30"}, strict=True)

        assert store.read() == {"name": "John"}

    def test_fill_base_non_strict_skips(self):
        """Test that unknown keys are skipped in non-strict mode."""
        store = make_store()
        store.fill_base({"name": "John", "bogus": "x", "age": "30"}, strict=False)

        assert store.read() == {"name": "John", "age": "30"}

    def test_fill_change_tracks_key(self):
        """Test that changes are stored and tracked in order."""
        store = make_store()
        assert store.fill_change("age", "31", strict=True) is True
        store.fill_change("name", "Johnny", strict=True)
        store.fill_change("age", "32", strict=True)

        assert store.read("age") == "32"
        assert store.changed_keys == ("age", "name")

    def test_fill_change_rejected(self):
        """Test that a skipped change is neither stored nor tracked."""
        store = make_store()
        assert store.fill_change("bogus", "x", strict=False) is False
        assert store.read() == {}
        assert store.changed_keys == ()

    def test_fill_changes_strict_aborts(self):
        """Test that fill_changes stops at the first unknown key."""
        store = make_store()

        with pytest.raises(InvalidFieldError) as exc_info:
            store.fill_changes({"name": "Johnny", "bogus": "x", "age": "31"}, strict=True)

        assert exc_info.value.field == "bogus"
        assert store.read() == {"name": "Johnny"}
        assert store.changed_keys == ("name",)

    def test_read_default(self):
        """Test reading a missing key returns the default."""
        store = make_store()
        assert store.read("name") is None
        assert store.read("name", "anonymous") == "anonymous"

    def test_read_view_is_read_only(self):
        """Test that the full read is a read-only view."""
        store = make_store()
        store.fill_base({"name": "John"}, strict=True)

        with pytest.raises(TypeError):
            store.read()["name"] = "Jane"

    def test_change_invalidates_cache(self):
        """Test that an accepted change drops the cached snapshot."""
        store = make_store()
        store.fill_base({"name": "John"}, strict=True)

        assert store.validated(upper_validator) == {"name": "JOHN"}
        store.fill_change("name", "Johnny", strict=True)
        assert not store.cache.is_cached
        assert store.validated(upper_validator) == {"name": "JOHNNY"}

    def test_rejected_change_keeps_cache(self):
        """Test that a skipped change does not invalidate the cache."""
        store = make_store()
        store.validated(upper_validator)
        store.fill_change("bogus", "x", strict=False)

        assert store.cache.is_cached

    def test_changes_validated(self):
        """Test that only changed keys are returned."""
        store = make_store()
        store.fill_base({"name": "John", "email": "a@b.c"}, strict=True)
        store.fill_change("email", "x@y.z", strict=True)

        assert store.changes_validated(upper_validator) == {"email": "X@Y.Z"}

    def test_write_and_clear_keep_cache(self):
        """Test that the patch primitives leave the cache alone."""
        store = make_store()
        store.validated(upper_validator)
        store.write("name", "John")
        store.clear()

        assert store.cache.is_cached
        assert store.read() == {}

    def test_clear_keeps_changed_keys(self):
        """Test that clear empties values but not the change history."""
        store = make_store()
        store.fill_change("name", "Johnny", strict=True)
        store.clear()

        assert store.read() == {}
        assert store.changed_keys == ("name",)


class TestPick:
    """Test cases for the pick helper."""

    def test_whole_snapshot(self):
        """Test that no key returns the snapshot itself."""
        snapshot = {"name": "John"}
        assert pick(snapshot, None, "x") is snapshot

    def test_single_value(self):
        """Test single value and default lookup."""
        snapshot = {"name": "John", "age": None}
        assert pick(snapshot, "name", None) == "John"
        assert pick(snapshot, "unknown", "default") == "default"
        assert pick(snapshot, "age", "default") is None
