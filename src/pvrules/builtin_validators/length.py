"""
Contains validator units which compare the length of a value with a limit given as rule parameter (e.g. `max:3`).
Values without a length (numbers, None, ...) are invalid.
"""
from collections.abc import Sized
from typing import Any

from frozendict import frozendict

from pvrules.utils import checked_param
from pvrules.validator import ValidatorUnit, Verdict


class Max(ValidatorUnit):
    """
    The value is invalid if it is longer than the parameter.
    """

    def validate(self, value: Any, param: Any, context: Any) -> Verdict:
        maximum = checked_param(param, int, "max")
        is_valid = isinstance(value, Sized) and len(value) <= maximum
        return Verdict(is_valid=is_valid, additional_data=frozendict(max=maximum))


class Min(ValidatorUnit):
    """
    The value is invalid if it is shorter than the parameter.
    """

    def validate(self, value: Any, param: Any, context: Any) -> Verdict:
        minimum = checked_param(param, int, "min")
        is_valid = isinstance(value, Sized) and len(value) >= minimum
        return Verdict(is_valid=is_valid, additional_data=frozendict(min=minimum))
