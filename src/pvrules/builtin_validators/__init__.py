"""
Contains the validator units every engine knows from the start. Use `ValidationEngine.add_validators` to register
your own ones.
"""
from frozendict import frozendict

from pvrules.validator import RegistryEntry

from .length import Max, Min
from .presence import In, Required

DEFAULT_VALIDATORS: frozendict[str, RegistryEntry] = frozendict(
    {
        "required": RegistryEntry(validator=Required(), err_msg="This field is required"),
        "max": RegistryEntry(validator=Max(), err_msg="This field is too long"),
        "min": RegistryEntry(validator=Min(), err_msg="This field is too short"),
        "in": RegistryEntry(validator=In(), err_msg="This field has none of the allowed values"),
    }
)
