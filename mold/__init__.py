"""
Molds: whitelisted staging objects that merge base data with user changes
and expose a validated, storage-ready snapshot.
"""
from mold.definition import MoldDefinition
from mold.errors import InvalidFieldError, ValidationFailure
from mold.immutable import ImmutableMold
from mold.mutable import MutableMold
from mold.patch import PatchMold
from mold.validators import model_validator_for

__all__ = [
    "ImmutableMold",
    "InvalidFieldError",
    "MoldDefinition",
    "MutableMold",
    "PatchMold",
    "ValidationFailure",
    "model_validator_for",
]
