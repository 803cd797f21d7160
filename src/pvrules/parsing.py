"""
Contains the default rule parser. It turns compact rule strings like `"required|max:3"` into the normalized rule map
the engine works with.

Grammar:
    rule  := token ("|" token)*
    token := name | name ":" arg ("," arg)*

Integer and float literals are converted, any other argument stays a string. A token with one argument gets a
scalar parameter, a token with several arguments a tuple and a token without arguments `None`.
The tokens `bail` and `omitempty` are no validators but switch on `stop_on_error` resp. `omit_empty` for the field.
"""
import re
from typing import Any, Mapping

from frozendict import frozendict

from .config import FieldConfig
from .errors import RuleDeclarationError
from .types import NormalizedRuleMap, RuleDeclaration, ValidatorParams

TOKEN_SEPARATOR = "|"
ARGS_SEPARATOR = ":"
ARG_SEPARATOR = ","
STOP_ON_ERROR_FLAG = "bail"
OMIT_EMPTY_FLAG = "omitempty"

_INT_PATTERN = re.compile(r"^[+-]?\d+$")
_FLOAT_PATTERN = re.compile(r"^[+-]?(\d+\.\d*|\.\d+)([eE][+-]?\d+)?$")


def _convert_arg(arg: str) -> Any:
    arg = arg.strip()
    if _INT_PATTERN.match(arg):
        return int(arg)
    if _FLOAT_PATTERN.match(arg):
        return float(arg)
    return arg


def parse_rule_string(field_name: str, rule: str, config: FieldConfig) -> ValidatorParams:
    """
    Parses the rule string of a single field. Flag tokens are written into `config`.
    """
    params: dict[str, Any] = {}
    for token in rule.split(TOKEN_SEPARATOR):
        name, has_args, raw_args = token.partition(ARGS_SEPARATOR)
        name = name.strip()
        if not name:
            continue
        if name == STOP_ON_ERROR_FLAG:
            config.stop_on_error[field_name] = True
            continue
        if name == OMIT_EMPTY_FLAG:
            config.omit_empty[field_name] = True
            continue
        if not has_args:
            params[name] = None
            continue
        args = tuple(_convert_arg(arg) for arg in raw_args.split(ARG_SEPARATOR))
        params[name] = args[0] if len(args) == 1 else args
    return frozendict(params)


def parse_rules(rules: Mapping[str, RuleDeclaration], config: FieldConfig) -> NormalizedRuleMap:
    """
    The default `RuleParser`. Nested engines are passed through unchanged.
    """
    # pylint: disable=import-outside-toplevel
    from .execution import ValidationEngine

    normalized: NormalizedRuleMap = {}
    for field_name, rule in rules.items():
        if isinstance(rule, ValidationEngine):
            normalized[field_name] = rule
        elif isinstance(rule, str):
            normalized[field_name] = parse_rule_string(field_name, rule, config)
        else:
            raise RuleDeclarationError(
                f"{field_name}: expected a rule string or a ValidationEngine but got {type(rule).__name__}"
            )
    return normalized
