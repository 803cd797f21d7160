"""
Contains validator units which check whether a value is given at all or is one of a set of allowed values.
"""
from collections.abc import Sized
from typing import Any

from frozendict import frozendict

from pvrules.validator import ValidatorUnit, Verdict


class Required(ValidatorUnit):
    """
    `None` and empty strings or containers (anything sized with length 0) are invalid. Zero and False are valid values.
    """

    def validate(self, value: Any, param: Any, context: Any) -> Verdict:
        if value is None:
            return Verdict(is_valid=False)
        if isinstance(value, Sized):
            return Verdict(is_valid=len(value) > 0)
        return Verdict(is_valid=True)


class In(ValidatorUnit):
    """
    The value must be one of the parameter items, e.g. `in:red,green`. Items are compared after conversion by the
    rule parser, so `in:1,2` compares against integers.
    """

    def validate(self, value: Any, param: Any, context: Any) -> Verdict:
        allowed = param if isinstance(param, tuple) else (param,)
        if value in allowed:
            return Verdict(is_valid=True)
        return Verdict(is_valid=False, additional_data=frozendict(allowed=", ".join(str(item) for item in allowed)))
