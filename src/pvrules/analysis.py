"""
Contains functionality to analyze the result of a validation process
"""
import itertools
from typing import Iterator, Optional

from .errors import ValidationFailedError
from .types import ErrorMap
from .validator import ErrorEntry


def _iter_errors(errors: ErrorMap, base_path: str = "") -> Iterator[tuple[str, ErrorEntry]]:
    for field_name, field_errors in errors.items():
        field_path = f"{base_path}.{field_name}" if base_path else field_name
        if isinstance(field_errors, dict):
            yield from _iter_errors(field_errors, field_path)
        else:
            for entry in field_errors:
                yield field_path, entry


def has_errors(errors: ErrorMap) -> bool:
    """Returns True if at least one field of the error map has a non-empty entry"""
    return any(len(field_errors) > 0 for field_errors in errors.values())


def _extract_err_msg(path_and_entry: tuple[str, ErrorEntry]) -> str:
    return path_and_entry[1].err_msg


class ValidationResult:
    """
    The function `ValidationEngine.validate` will return an instance of this class. The error map is available
    as `errors` regardless of the outcome. The other properties are calculated only if you use them.
    """

    def __init__(self, errors: ErrorMap):
        self.errors = errors
        self._failed_fields: Optional[list[str]] = None
        self._all_errors: Optional[list[tuple[str, ErrorEntry]]] = None
        self._num_errors_per_message: Optional[dict[str, int]] = None

    def __bool__(self) -> bool:
        return self.is_valid

    def __repr__(self):
        return f"ValidationResult(is_valid={self.is_valid}, errors={self.errors!r})"

    @property
    def is_valid(self) -> bool:
        """True if no field has any errors"""
        return not has_errors(self.errors)

    @property
    def failed_fields(self) -> list[str]:
        """The (top level) fields with at least one error, in the order of the error map"""
        if self._failed_fields is None:
            self._failed_fields = [field_name for field_name, field_errors in self.errors.items() if field_errors]
        return self._failed_fields

    @property
    def succeeded_fields(self) -> list[str]:
        """The (top level) fields without errors - this includes skipped fields"""
        return [field_name for field_name in self.errors if field_name not in self.failed_fields]

    @property
    def all_errors(self) -> list[tuple[str, ErrorEntry]]:
        """
        A flat list of all error entries together with their field path. Errors of nested engines have a dotted
        path, e.g. `address.street`.
        """
        if self._all_errors is None:
            self._all_errors = list(_iter_errors(self.errors))
        return self._all_errors

    @property
    def num_errors_total(self) -> int:
        """Number of error entries in total (including nested ones)"""
        return len(self.all_errors)

    @property
    def num_errors_per_message(self) -> dict[str, int]:
        """Maps each error message onto the number of times it occurred"""
        if self._num_errors_per_message is None:
            self._num_errors_per_message = {
                err_msg: sum(1 for _ in entries)
                for err_msg, entries in itertools.groupby(
                    sorted(self.all_errors, key=_extract_err_msg), key=_extract_err_msg
                )
            }
        return self._num_errors_per_message

    def raise_for_errors(self) -> "ValidationResult":
        """
        Raises a ValidationFailedError carrying this result if any field has errors. Returns the result otherwise.
        """
        if not self.is_valid:
            raise ValidationFailedError(self)
        return self
