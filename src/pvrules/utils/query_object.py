"""
Contains some useful utility functions to query values from the validated data and to check rule parameters.
"""
from typing import Any, Mapping, TypeVar, overload

from typeguard import TypeCheckError, check_type

from pvrules.errors import InvalidParameterError

AttrT = TypeVar("AttrT")


def field_value(data: Any, field_name: str) -> Any:
    """
    Returns the value of the field `field_name`. Mappings are queried by key, any other object by attribute.
    If the field doesn't exist, `None` is returned.
    """
    if isinstance(data, Mapping):
        return data.get(field_name)
    return getattr(data, field_name, None)


@overload
def checked_param(param: Any, param_type: type[AttrT], validator_name: str) -> AttrT:
    ...


@overload
def checked_param(param: Any, param_type: Any, validator_name: str) -> Any:
    ...


def checked_param(param: Any, param_type: Any, validator_name: str) -> Any:
    """
    Returns `param` if it matches `param_type`. Otherwise an InvalidParameterError is raised.
    """
    try:
        return check_type(param, param_type)
    except TypeCheckError as error:
        raise InvalidParameterError(f"{validator_name}: invalid parameter {param!r}: {error}") from error
