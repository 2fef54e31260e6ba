import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple
from mold.constants import STRICT_INITIAL, STRICT_PATCH_DEFAULT
from mold.core.cache import restrict
from mold.core.guard import FieldGuard
from mold.core.store import MergeStore, Validator

logger = logging.getLogger(__name__)


class PatchMold:
    """
    Single-mapping mold for create, full update and patch requests.

    Initial data (e.g. the existing entity) is loaded strictly. User input
    is merged with apply_patch(), which remembers every key it touched.
    all_validated() returns the complete storage-ready data and
    validated_patch() only the patched part of it.

    There is no cache: the validator runs on every read.

    Note:
        reset() empties the data but keeps the patch history, so a later
        validated_patch() is still restricted to every key patched so far.
    """

    def __init__(self,
                 public_fields: Sequence[str],
                 validator: Validator,
                 initial: Optional[Mapping[str, Any]] = None):
        self._validator = validator
        self._store = MergeStore(FieldGuard(public_fields=public_fields))
        self._patched_keys: List[str] = []
        self._store.fill_base(initial or {}, STRICT_INITIAL)

    @property
    def public_fields(self) -> Tuple[str, ...]:
        return self._store.guard.public_fields

    @property
    def patched_keys(self) -> Tuple[str, ...]:
        """Keys in patch order, repeated if patched more than once."""
        return tuple(self._patched_keys)

    def apply_patch(self, data: Mapping[str, Any], strict: bool = STRICT_PATCH_DEFAULT) -> 'PatchMold':
        """Merge whitelisted fields from data; unknown keys are skipped unless strict."""
        for key, value in data.items():
            if self._store.guard.is_allowed(key, strict):
                self._set(key, value)
                self._patched_keys.append(key)
        return self

    def all_validated(self) -> Dict[str, Any]:
        """Return the final validated data ready for storage."""
        return self._store.run_validator(self._validator)

    def validated_patch(self) -> Dict[str, Any]:
        """Return validated data for patched keys only."""
        return restrict(self.all_validated(), self._patched_keys)

    def reset(self) -> 'PatchMold':
        """Clear all data. The patch history is kept."""
        logger.debug(f"Resetting {type(self).__name__}, keeping {len(self._patched_keys)} patched key(s)")
        self._store.clear()
        return self

    def _set(self, key: str, value: Any) -> 'PatchMold':
        """Set a raw value without the whitelist check. For subclass use only."""
        self._store.write(key, value)
        return self

    def _get(self, key: Optional[str] = None, default: Any = None) -> Any:
        """Return the raw data or a single raw value. For subclass use only."""
        return self._store.read(key, default)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fields={list(self.public_fields)}, patched={self._patched_keys})"
