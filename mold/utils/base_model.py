# mold/utils/base_model.py
from pydantic import BaseModel, ConfigDict


class ImmutableModel(BaseModel):
    """
    Base class for configuration models that must not change after creation.

    Field whitelists and mold definitions inherit from this class so a
    single instance can be shared between molds:
    - Immutability: All instances are frozen after creation
    - Arbitrary types: Callables and other plain objects are accepted as fields
    """
    model_config = ConfigDict(
        frozen=True,  # Make all instances immutable
        arbitrary_types_allowed=True,
    )
