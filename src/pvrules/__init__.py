"""
This package enables you to declare validation rules per field of your data and to validate the fields
asynchronously. Fields may be delegated to nested engines to validate arbitrary object structures.
"""

from .analysis import ValidationResult
from .builtin_validators import DEFAULT_VALIDATORS
from .config import FieldConfig
from .errors import (
    ConfigurationError,
    InvalidParameterError,
    PvRulesError,
    RuleDeclarationError,
    UnknownValidatorError,
    ValidationFailedError,
)
from .execution import ValidationEngine
from .parsing import parse_rules
from .validator import ErrorEntry, RegistryEntry, ValidatorRegistry, ValidatorUnit, Verdict
