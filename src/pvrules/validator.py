"""
Contains the validator units, their verdicts and the registry which maps validator names onto them.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Iterator, Mapping, Optional

from frozendict import frozendict

from .errors import UnknownValidatorError
from .types import AdditionalData, MaybeAwaitable

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Verdict:
    """
    The outcome of a single validator unit call. If `err_msg` is None, the default message of the registry entry
    is used.
    """

    is_valid: bool
    err_msg: Optional[str] = None
    additional_data: AdditionalData = field(default_factory=frozendict)


@dataclass(frozen=True)
class ErrorEntry:
    """
    A single validation failure of a field.
    """

    err_msg: str
    additional_data: AdditionalData = field(default_factory=frozendict)


class ValidatorUnit(ABC):
    """
    A pluggable validation capability. Implementations must not keep state between calls except for the things
    they got at construction time. `validate` may be a coroutine function if the check has to wait for I/O.
    """

    @abstractmethod
    def validate(self, value: Any, param: Any, context: Any) -> MaybeAwaitable[Verdict]:
        """
        Checks `value` using the rule parameter `param`. `context` is the context data of the validation run.
        """

    @property
    def name(self) -> str:
        """The class name - only used for logging"""
        return type(self).__name__


@dataclass(frozen=True)
class RegistryEntry:
    """
    Binds a validator unit to its default error message.
    """

    validator: ValidatorUnit
    err_msg: str


class ValidatorRegistry(Mapping[str, RegistryEntry]):
    """
    A mutable mapping from validator names to registry entries. Every engine owns its own registry, so changes
    on one registry never affect another one.
    """

    def __init__(self, entries: Optional[Mapping[str, RegistryEntry]] = None):
        self._entries: dict[str, RegistryEntry] = dict(entries) if entries is not None else {}

    def __getitem__(self, validator_name: str) -> RegistryEntry:
        return self._entries[validator_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return f"ValidatorRegistry({', '.join(self._entries)})"

    @property
    def names(self) -> frozenset[str]:
        """All registered validator names"""
        return frozenset(self._entries)

    def add(self, entries: Mapping[str, RegistryEntry]) -> None:
        """
        Registers the given entries. Existing entries with the same name get overwritten.
        """
        for validator_name, entry in entries.items():
            if validator_name in self._entries:
                _logger.debug("Overwriting validator '%s' with %s", validator_name, entry.validator.name)
            self._entries[validator_name] = RegistryEntry(validator=entry.validator, err_msg=entry.err_msg)

    def override_messages(self, messages: Mapping[str, str]) -> None:
        """
        Replaces the default error messages of already registered validators. If any of the names is not
        registered an UnknownValidatorError is raised and no message is changed at all.
        """
        for validator_name in messages:
            if validator_name not in self._entries:
                raise UnknownValidatorError(validator_name)
        for validator_name, err_msg in messages.items():
            self._entries[validator_name] = replace(self._entries[validator_name], err_msg=err_msg)
            _logger.debug("Overrode message of validator '%s'", validator_name)

    def copy(self) -> "ValidatorRegistry":
        """Returns an independent registry with the same entries"""
        return ValidatorRegistry(self._entries)
