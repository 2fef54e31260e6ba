import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple
from mold.core.cache import ValidationCache
from mold.core.guard import FieldGuard

logger = logging.getLogger(__name__)

# Validator contract: read-only view of the raw store in, validated data out
Validator = Callable[[Mapping[str, Any]], Mapping[str, Any]]


class MergeStore:
    """
    Raw field storage shared by the mold variants.

    Values arrive either as base data (trusted, e.g. an existing record) or
    as changes (user supplied). Both pass through the field guard, only
    changes are tracked and only changes invalidate the validation cache.
    """

    def __init__(self, guard: FieldGuard):
        self.guard = guard
        self.cache = ValidationCache()
        self._data: Dict[str, Any] = {}
        # dict used as an ordered set
        self._changed: Dict[str, None] = {}

    @property
    def changed_keys(self) -> Tuple[str, ...]:
        return tuple(self._changed)

    def fill_base(self, mapping: Mapping[str, Any], strict: bool) -> None:
        """
        Write base values without marking them changed.

        In strict mode the first rejected key aborts the call; values
        written before it are kept.
        """
        for key, value in mapping.items():
            if self.guard.is_allowed(key, strict):
                self._data[key] = value

    def fill_change(self, key: str, value: Any, strict: bool) -> bool:
        """Write a single value, mark it changed and invalidate the cache."""
        if not self.guard.is_allowed(key, strict):
            return False
        self._data[key] = value
        self._changed[key] = None
        self.cache.invalidate()
        return True

    def fill_changes(self, mapping: Mapping[str, Any], strict: bool) -> None:
        for key, value in mapping.items():
            self.fill_change(key, value, strict)

    def write(self, key: str, value: Any) -> None:
        """
        Unguarded write for the patch variant.

        PatchMold validates without the cache, so nothing is invalidated.
        """
        self._data[key] = value

    def clear(self) -> None:
        """Drop every raw value. The changed keys and the cache are kept."""
        self._data.clear()

    def read(self, key: Optional[str] = None, default: Any = None) -> Any:
        """Return a read-only view of the raw store, or a single raw value."""
        if key is None:
            return MappingProxyType(self._data)
        return self._data.get(key, default)

    def run_validator(self, validator: Validator) -> Dict[str, Any]:
        """Run a validator against the current raw values, bypassing the cache."""
        logger.debug(f"Validating {len(self._data)} raw field(s)")
        return dict(validator(self.read()))

    def validated(self, validator: Validator) -> Mapping[str, Any]:
        return self.cache.get_validated(lambda: self.run_validator(validator))

    def changes_validated(self, validator: Validator) -> Dict[str, Any]:
        return self.cache.get_changed_only_validated(
            lambda: self.run_validator(validator), self._changed
        )


def pick(snapshot: Mapping[str, Any], key: Optional[str], default: Any) -> Any:
    """Return the whole snapshot when key is None, else one value or default."""
    if key is None:
        return snapshot
    return snapshot.get(key, default)
