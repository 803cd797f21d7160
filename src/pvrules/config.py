"""
Contains the per field configuration of a validation engine
"""
from dataclasses import dataclass, field

from .types import ShouldValidate


@dataclass
class FieldConfig:
    """
    Three independent mappings keyed by field name. A field which is missing in a mapping is treated as
    "not configured", i.e. don't stop on error, don't omit empty values and always validate.
    """

    stop_on_error: dict[str, bool] = field(default_factory=dict)
    omit_empty: dict[str, bool] = field(default_factory=dict)
    should_validate: dict[str, ShouldValidate] = field(default_factory=dict)

    def copy(self) -> "FieldConfig":
        """
        Returns a copy whose mappings can be changed without affecting this configuration.
        The predicates themselves are shared.
        """
        return FieldConfig(
            stop_on_error=dict(self.stop_on_error),
            omit_empty=dict(self.omit_empty),
            should_validate=dict(self.should_validate),
        )
