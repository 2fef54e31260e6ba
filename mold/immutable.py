from typing import Any, Mapping, Optional, Sequence, Tuple
from mold.constants import STRICT_BASE_DEFAULT
from mold.core.guard import FieldGuard
from mold.core.store import MergeStore, Validator, pick


class ImmutableMold:
    """
    Mold whose data is fixed at construction.

    Base data (e.g. the stored record) is filled first without change
    tracking, then the user's changes are applied on top of it and tracked.
    Nothing can be modified afterward: validation runs lazily on the first
    read and the result is kept for the lifetime of the object, so a built
    mold can be handed to any consumer.
    """

    def __init__(self,
                 public_fields: Sequence[str],
                 validator: Validator,
                 base: Optional[Mapping[str, Any]] = None,
                 changes: Optional[Mapping[str, Any]] = None,
                 strict: bool = STRICT_BASE_DEFAULT):
        store = MergeStore(FieldGuard(public_fields=public_fields))
        store.fill_base(base or {}, strict)
        store.fill_changes(changes or {}, strict)
        object.__setattr__(self, '_validator', validator)
        object.__setattr__(self, '_store', store)

    def __setattr__(self, name, value):
        raise TypeError(f"{type(self).__name__} objects are immutable")

    def __delattr__(self, name):
        raise TypeError(f"{type(self).__name__} objects are immutable")

    @property
    def public_fields(self) -> Tuple[str, ...]:
        return self._store.guard.public_fields

    @property
    def changed_fields(self) -> Tuple[str, ...]:
        return self._store.changed_keys

    def validated(self, key: Optional[str] = None, default: Any = None) -> Any:
        """Return all validated data, or a single validated value."""
        return pick(self._store.validated(self._validator), key, default)

    def changes_validated(self, key: Optional[str] = None, default: Any = None) -> Any:
        """Return validated data for changed fields only, or a single value."""
        return pick(self._store.changes_validated(self._validator), key, default)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fields={list(self.public_fields)}, changed={list(self.changed_fields)})"
