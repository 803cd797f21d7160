"""
Contains the exceptions raised by the validation framework.
Field validation failures are no exceptions. They are collected in the error map of a `ValidationResult`.
Only if you explicitly ask for it (`ValidationResult.raise_for_errors`) they get raised as `ValidationFailedError`.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .analysis import ValidationResult
    from .types import ErrorMap


class PvRulesError(Exception):
    """
    Base class of all exceptions raised by this package.
    """


class ConfigurationError(PvRulesError):
    """
    The engine is set up in a way that it can't validate anything. This is a programming error and aborts the whole
    validation run.
    """


class UnknownValidatorError(ConfigurationError, LookupError):
    """
    A validator name got referenced (by a rule or a message override) which is not registered.
    """

    def __init__(self, validator_name: str, field_name: str | None = None):
        self.validator_name = validator_name
        self.field_name = field_name
        if field_name is None:
            message = f"Validator '{validator_name}' doesn't exist. Register it before overriding its message."
        else:
            message = f"Please provide an existing validator name for {field_name}. '{validator_name}' doesn't exist!"
        super().__init__(message)


class RuleDeclarationError(ConfigurationError, TypeError):
    """
    A rule declaration is neither a rule string nor a nested engine.
    """


class InvalidParameterError(ConfigurationError, ValueError):
    """
    A validator got a parameter it can't work with (e.g. `max:abc`).
    """


class ValidationFailedError(PvRulesError):
    """
    Raised by `ValidationResult.raise_for_errors` if at least one field has errors.
    """

    def __init__(self, result: "ValidationResult"):
        self.result = result
        super().__init__(f"Validation failed for field(s) {', '.join(result.failed_fields)}")

    @property
    def errors(self) -> "ErrorMap":
        """The complete error map of the failed validation run"""
        return self.result.errors
