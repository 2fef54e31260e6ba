from typing import Any, Mapping, Optional, Sequence, Tuple
from mold.constants import STRICT_BASE_DEFAULT, STRICT_CHANGES_DEFAULT
from mold.core.guard import FieldGuard
from mold.core.store import MergeStore, Validator, pick


class MutableMold:
    """
    Mold for building entity data incrementally.

    Start from optional base data (an existing record or defaults), then
    apply user edits with change() or changes(). validated() returns the
    full storage-ready data, changes_validated() only the fields that were
    explicitly changed.

    Usage:
        mold = MutableMold(["name", "email"], validate_user, base=record)
        mold.change("name", "Johnny")
        repository.update(user_id, mold.changes_validated())
    """

    def __init__(self,
                 public_fields: Sequence[str],
                 validator: Validator,
                 base: Optional[Mapping[str, Any]] = None,
                 strict: bool = STRICT_BASE_DEFAULT):
        self._validator = validator
        self._store = MergeStore(FieldGuard(public_fields=public_fields))
        self._store.fill_base(base or {}, strict)

    @property
    def public_fields(self) -> Tuple[str, ...]:
        return self._store.guard.public_fields

    @property
    def changed_fields(self) -> Tuple[str, ...]:
        return self._store.changed_keys

    def change(self, key: str, value: Any, strict: bool = STRICT_CHANGES_DEFAULT) -> 'MutableMold':
        """Change a single field."""
        self._store.fill_change(key, value, strict)
        return self

    def changes(self, changes: Mapping[str, Any], strict: bool = STRICT_CHANGES_DEFAULT) -> 'MutableMold':
        """Change several fields, in the mapping's order."""
        self._store.fill_changes(changes, strict)
        return self

    def validated(self, key: Optional[str] = None, default: Any = None) -> Any:
        """Return all validated data, or a single validated value."""
        return pick(self._store.validated(self._validator), key, default)

    def changes_validated(self, key: Optional[str] = None, default: Any = None) -> Any:
        """Return validated data for changed fields only, or a single value."""
        return pick(self._store.changes_validated(self._validator), key, default)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fields={list(self.public_fields)}, changed={list(self.changed_fields)})"
