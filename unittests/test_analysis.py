import pytest

from pvrules import ErrorEntry, ValidationFailedError, ValidationResult


@pytest.fixture
def failed_result() -> ValidationResult:
    return ValidationResult(
        {
            "name": [ErrorEntry(err_msg="too long", additional_data={"max": 3}), ErrorEntry(err_msg="required")],
            "city": [],
            "address": {"street": [ErrorEntry(err_msg="required")], "zip": []},
        }
    )


class TestValidationResult:
    def test_valid(self):
        result = ValidationResult({"name": [], "city": []})
        assert result.is_valid
        assert result
        assert result.failed_fields == []
        assert result.succeeded_fields == ["name", "city"]
        assert result.all_errors == []
        assert result.raise_for_errors() is result

    def test_failed(self, failed_result: ValidationResult):
        assert not failed_result.is_valid
        assert not failed_result
        assert failed_result.failed_fields == ["name", "address"]
        assert failed_result.succeeded_fields == ["city"]

    def test_all_errors(self, failed_result: ValidationResult):
        assert [path for path, _ in failed_result.all_errors] == ["name", "name", "address.street"]
        assert failed_result.num_errors_total == 3
        assert failed_result.num_errors_per_message == {"required": 2, "too long": 1}

    def test_raise_for_errors(self, failed_result: ValidationResult):
        with pytest.raises(ValidationFailedError, match="name, address") as error_info:
            failed_result.raise_for_errors()
        assert error_info.value.errors is failed_result.errors
        assert error_info.value.result is failed_result
