from typing import Any, Callable, Mapping, Optional
from pydantic import Field
from mold.constants import STRICT_BASE_DEFAULT
from mold.core.guard import PublicFields
from mold.immutable import ImmutableMold
from mold.mutable import MutableMold
from mold.patch import PatchMold
from mold.utils.base_model import ImmutableModel


class MoldDefinition(ImmutableModel):
    """
    Whitelist and validator for one kind of entity, shared by all its molds.

    A definition is declared once (typically at module level) and used as a
    factory for the three mold variants:

        USER_MOLD = MoldDefinition(
            public_fields=("name", "email", "age"),
            validator=validate_user,
        )
        mold = USER_MOLD.immutable(base=record, changes=request_data)
    """
    public_fields: PublicFields = Field(
        description="Field names molds of this kind may store"
    )
    validator: Callable[[Mapping[str, Any]], Mapping[str, Any]] = Field(
        description="Turns raw mold data into storage-ready data; raises on invalid input"
    )

    def mutable(self,
                base: Optional[Mapping[str, Any]] = None,
                strict: bool = STRICT_BASE_DEFAULT) -> MutableMold:
        return MutableMold(self.public_fields, self.validator, base=base, strict=strict)

    def immutable(self,
                  base: Optional[Mapping[str, Any]] = None,
                  changes: Optional[Mapping[str, Any]] = None,
                  strict: bool = STRICT_BASE_DEFAULT) -> ImmutableMold:
        return ImmutableMold(self.public_fields, self.validator, base=base, changes=changes, strict=strict)

    def patch(self, initial: Optional[Mapping[str, Any]] = None) -> PatchMold:
        return PatchMold(self.public_fields, self.validator, initial=initial)
