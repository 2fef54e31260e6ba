import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

logger = logging.getLogger(__name__)


def restrict(validated: Mapping[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """Return the entries of validated whose key is in keys, in validated's order."""
    wanted = set(keys)
    return {key: value for key, value in validated.items() if key in wanted}


class ValidationCache:
    """Memoizes a validator's result until the next accepted change."""

    def __init__(self):
        self._validated: Optional[Mapping[str, Any]] = None

    @property
    def is_cached(self) -> bool:
        return self._validated is not None

    def invalidate(self):
        self._validated = None

    def get_validated(self, compute: Callable[[], Mapping[str, Any]]) -> Mapping[str, Any]:
        """
        Return the cached snapshot, computing it first if needed.

        The snapshot is a read-only view so callers sharing it cannot alter
        it. Nothing is stored when compute raises, so the next call retries.
        """
        if self._validated is None:
            logger.debug("Computing validated snapshot")
            self._validated = MappingProxyType(dict(compute()))
        return self._validated

    def get_changed_only_validated(self,
                                   compute: Callable[[], Mapping[str, Any]],
                                   changed: Iterable[str]) -> Dict[str, Any]:
        """Return the cached snapshot restricted to changed keys."""
        return restrict(self.get_validated(compute), changed)
