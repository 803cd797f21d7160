"""
Contains the types used in the validation framework
"""
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Mapping, Protocol, TypeAlias, TypeVar, Union

from frozendict import frozendict

if TYPE_CHECKING:
    from .config import FieldConfig
    from .execution import ValidationEngine
    from .validator import ErrorEntry


T = TypeVar("T")
MaybeAwaitable: TypeAlias = Union[T, Awaitable[T]]

ErrorMap: TypeAlias = dict[str, Union[list["ErrorEntry"], "ErrorMap"]]
"""
Maps every validated field onto its error entries (in validator evaluation order). If the field got delegated to a
nested engine which failed, the entry is the error map of the nested engine instead.
"""
AdditionalData: TypeAlias = Mapping[str, str | int | float]
ValidatorParams: TypeAlias = frozendict[str, Any]
RuleDeclaration: TypeAlias = Union[str, "ValidationEngine"]
NormalizedRuleMap: TypeAlias = dict[str, Union[ValidatorParams, "ValidationEngine"]]
ResultListener: TypeAlias = Callable[[ErrorMap], MaybeAwaitable[None]]


class ShouldValidate(Protocol):
    """
    A predicate deciding by the context data whether a field gets validated at all.
    `should_validate` may be a coroutine function.
    """

    def should_validate(self, context: Any) -> MaybeAwaitable[bool]:
        ...


class RuleParser(Protocol):
    """
    Turns the rule declarations of an engine into a normalized rule map. It is called once per validation run
    with a copy of the engine's field configuration which it may amend (e.g. to set `stop_on_error` for a field).
    """

    def __call__(self, rules: Mapping[str, RuleDeclaration], config: "FieldConfig") -> NormalizedRuleMap:
        ...
