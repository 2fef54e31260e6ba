from mold.core.cache import ValidationCache
from mold.core.guard import FieldGuard
from mold.core.store import MergeStore, Validator, pick

__all__ = ["FieldGuard", "MergeStore", "ValidationCache", "Validator", "pick"]
