from typing import Any


class InvalidFieldError(ValueError):
    """Raised when a field outside the whitelist is supplied in strict mode."""

    def __init__(self, field: Any):
        self.field = field
        super().__init__(f"Invalid field: {field}")


class ValidationFailure(ValueError):
    """
    Optional base class for errors raised by validator callables.

    Molds never raise or wrap this themselves; whatever a validator raises
    reaches the caller unmodified.
    """
