"""
Contains the ValidationEngine which validates the fields of a data object concurrently according to its rules.
"""
import asyncio
import inspect
import logging
from typing import Any, Generic, Mapping, Optional, TypeVar

from frozendict import frozendict
from typeguard import CollectionCheckStrategy, TypeCheckError, check_type

from .analysis import ValidationResult
from .builtin_validators import DEFAULT_VALIDATORS
from .config import FieldConfig
from .errors import RuleDeclarationError, UnknownValidatorError
from .parsing import parse_rules
from .types import (
    ErrorMap,
    MaybeAwaitable,
    NormalizedRuleMap,
    ResultListener,
    RuleDeclaration,
    RuleParser,
    ShouldValidate,
    ValidatorParams,
)
from .utils import field_value
from .validator import ErrorEntry, RegistryEntry, ValidatorRegistry

_logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")
DataT = TypeVar("DataT")


async def _resolve(result: MaybeAwaitable[ResultT]) -> ResultT:
    """Awaits the result of a sync or async collaborator if necessary"""
    if inspect.isawaitable(result):
        return await result
    return result


class ValidationEngine(Generic[DataT]):
    """
    The ValidationEngine validates a data object field by field. Each field is checked by the validators named in
    its rule or is delegated to a nested engine. The configuration methods return the engine itself, so you can
    chain them:
    ```
    engine = (
        ValidationEngine()
        .set_rules({"name": "required|max:30", "address": address_engine})
        .set_messages({"max": "Too long"})
        .add_result_listener(print)
    )
    result = await engine.validate({"name": "John Doe", "address": {...}})
    ```
    The error map of a run is local to that run. Still, don't change the configuration of an engine while it is
    validating.
    """

    def __init__(
        self,
        rule_parser: RuleParser = parse_rules,
        validators: Mapping[str, RegistryEntry] = DEFAULT_VALIDATORS,
    ):
        self._rule_parser = rule_parser
        self._registry = ValidatorRegistry(validators)
        self._config = FieldConfig()
        self._rules: dict[str, RuleDeclaration] = {}
        self._listeners: list[ResultListener] = []

    def __repr__(self):
        return f"ValidationEngine(fields={list(self._rules)})"

    @property
    def registry(self) -> ValidatorRegistry:
        """The validators known to this engine"""
        return self._registry

    @property
    def config(self) -> FieldConfig:
        """The per field configuration. Rule flags like `bail` are not reflected here."""
        return self._config

    @property
    def rules(self) -> frozendict[str, RuleDeclaration]:
        """The rule declarations as set by `set_rules`"""
        return frozendict(self._rules)

    def add_validators(self, validators: Mapping[str, RegistryEntry]) -> "ValidationEngine":
        """Registers additional validators or replaces existing ones with the same name"""
        self._registry.add(validators)
        return self

    def set_messages(self, messages: Mapping[str, str]) -> "ValidationEngine":
        """
        Overrides the default error messages of registered validators.
        Raises an UnknownValidatorError if a validator is not registered.
        """
        self._registry.override_messages(messages)
        return self

    def set_should_validate(self, should_validate: Mapping[str, ShouldValidate]) -> "ValidationEngine":
        """Replaces all should-validate predicates"""
        self._config.should_validate = dict(should_validate)
        return self

    def set_stop_on_error(self, stop_on_error: Mapping[str, bool]) -> "ValidationEngine":
        """Replaces the stop-on-error flags of all fields"""
        self._config.stop_on_error = dict(stop_on_error)
        return self

    def set_omit_empty(self, omit_empty: Mapping[str, bool]) -> "ValidationEngine":
        """Replaces the omit-empty flags of all fields"""
        self._config.omit_empty = dict(omit_empty)
        return self

    def set_rules(self, rules: Mapping[str, RuleDeclaration]) -> "ValidationEngine":
        """
        Replaces all rule declarations. A declaration is either a rule string or a nested ValidationEngine.
        """
        try:
            check_type(
                rules,
                Mapping[str, str | ValidationEngine],
                collection_check_strategy=CollectionCheckStrategy.ALL_ITEMS,
            )
        except TypeCheckError as error:
            raise RuleDeclarationError(f"Invalid rule declarations: {error}") from error
        self._rules = dict(rules)
        return self

    def add_result_listener(self, listener: ResultListener) -> "ValidationEngine":
        """
        Adds a callable which gets the error map after every validation run which didn't abort.
        Listeners are called in the order they got added. Coroutine functions are awaited.
        """
        self._listeners.append(listener)
        return self

    def clone(self) -> "ValidationEngine":
        """
        Returns an engine with the same rules, validators, configuration and listeners which can be changed
        independently of this engine. Nested engines are shared.
        """
        engine: ValidationEngine = ValidationEngine(rule_parser=self._rule_parser, validators=self._registry)
        engine._config = self._config.copy()  # pylint: disable=protected-access
        engine._rules = dict(self._rules)  # pylint: disable=protected-access
        engine._listeners = list(self._listeners)  # pylint: disable=protected-access
        return engine

    async def _is_skipped(self, field_name: str, value: Any, context: Any, config: FieldConfig) -> bool:
        predicate = config.should_validate.get(field_name)
        if predicate is not None and not await _resolve(predicate.should_validate(context)):
            _logger.debug("Skipping field '%s': should not be validated", field_name)
            return True
        if config.omit_empty.get(field_name, False) and not value:
            _logger.debug("Skipping field '%s': value is empty", field_name)
            return True
        return False

    async def _validate_field(
        self,
        field_name: str,
        rule: "ValidatorParams | ValidationEngine",
        value: Any,
        context: Any,
        config: FieldConfig,
    ) -> list[ErrorEntry] | ErrorMap:
        field_errors: list[ErrorEntry] = []
        if await self._is_skipped(field_name, value, context, config):
            return field_errors

        if isinstance(rule, ValidationEngine):
            nested_result = await rule.validate(value, context)
            if not nested_result.is_valid:
                return nested_result.errors
            return field_errors

        for validator_name, param in rule.items():
            if not validator_name:
                break
            if validator_name not in self._registry:
                raise UnknownValidatorError(validator_name, field_name)
            entry = self._registry[validator_name]
            verdict = await _resolve(entry.validator.validate(value, param, context))
            if verdict.is_valid:
                continue
            field_errors.append(
                ErrorEntry(
                    err_msg=entry.err_msg if verdict.err_msg is None else verdict.err_msg,
                    additional_data=verdict.additional_data,
                )
            )
            if config.stop_on_error.get(field_name, False):
                break
        return field_errors

    async def validate(self, data: DataT, context_data: Optional[Any] = None) -> ValidationResult:
        """
        Validates all fields of `data` concurrently. `context_data` is handed to should-validate predicates,
        validators and nested engines. It defaults to `data`.
        The returned result contains an entry for every field of the rules (an empty list if the field is valid or
        got skipped). Configuration errors and exceptions raised by validators abort the whole run and are
        propagated. In this case the listeners are not called.
        """
        context = data if context_data is None else context_data
        config = self._config.copy()
        normalized_rules: NormalizedRuleMap = self._rule_parser(self._rules, config)

        tasks = [
            asyncio.create_task(
                self._validate_field(field_name, rule, field_value(data, field_name), context, config),
                name=f"validate-{field_name}",
            )
            for field_name, rule in normalized_rules.items()
        ]
        try:
            field_results = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        errors: ErrorMap = dict(zip(normalized_rules, field_results))

        for listener in self._listeners:
            await _resolve(listener(errors))

        result = ValidationResult(errors)
        _logger.debug(
            "Validated %i field(s), %i failed: %s", len(errors), len(result.failed_fields), result.failed_fields
        )
        return result
