from typing import Any, Callable, Dict, Mapping, Type
from pydantic import BaseModel


def model_validator_for(model_cls: Type[BaseModel], **dump_kwargs: Any) -> Callable[[Mapping[str, Any]], Dict[str, Any]]:
    """
    Build a mold validator from a pydantic model.

    The raw mold data is validated with model_cls and dumped back to a
    dictionary. Pydantic's ValidationError is raised unchanged.

    Args:
        model_cls: Pydantic model describing the storage-ready shape
        **dump_kwargs: Passed to model_dump() (e.g. exclude_none=True)

    Returns:
        Callable usable as the validator of any mold
    """
    def validate(raw: Mapping[str, Any]) -> Dict[str, Any]:
        return model_cls.model_validate(dict(raw)).model_dump(**dump_kwargs)

    validate.__name__ = f"validate_{model_cls.__name__}"
    return validate
