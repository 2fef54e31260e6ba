import logging
from typing import Annotated, Any, Tuple
from pydantic import AfterValidator, Field
from mold.errors import InvalidFieldError
from mold.utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


def check_field_names(names: Tuple[str, ...]) -> Tuple[str, ...]:
    """Validate that every whitelisted name is a non-empty string."""
    for name in names:
        if not name:
            raise ValueError("Public field names cannot be empty")
    return names


# Whitelist type shared by every model holding public field names
PublicFields = Annotated[Tuple[str, ...], AfterValidator(check_field_names)]


class FieldGuard(ImmutableModel):
    """
    Whitelist check performed before every write to a mold's raw store.

    Membership is an exact match: the key must be a string equal to one of
    the public field names. No normalization or case folding is applied.
    """
    public_fields: PublicFields = Field(
        description="Field names a mold is allowed to store"
    )

    def is_allowed(self, key: Any, strict: bool) -> bool:
        """
        Check a key against the whitelist.

        Args:
            key: Field name supplied by the caller
            strict: Raise instead of returning False for unknown keys

        Returns:
            True if the key may be stored, False if it must be skipped

        Raises:
            InvalidFieldError: If the key is unknown and strict is True
        """
        if isinstance(key, str) and key in self.public_fields:
            return True

        if strict:
            logger.warning(f"Rejected field outside whitelist: {key!r}")
            raise InvalidFieldError(key)

        logger.debug(f"Skipping field outside whitelist: {key!r}")
        return False
