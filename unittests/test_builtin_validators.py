from collections import deque

import pytest

from pvrules import InvalidParameterError
from pvrules.builtin_validators import In, Max, Min, Required


class EmptySized:
    def __len__(self) -> int:
        return 0


class TestLength:
    @pytest.mark.parametrize(
        "value, is_valid",
        [
            pytest.param("ab", True, id="shorter"),
            pytest.param("abc", True, id="equal"),
            pytest.param("abcd", False, id="longer"),
            pytest.param([1, 2, 3, 4], False, id="list"),
            pytest.param(12345, False, id="not sized"),
            pytest.param(None, False, id="None"),
        ],
    )
    def test_max(self, value, is_valid: bool):
        verdict = Max().validate(value, 3, None)
        assert verdict.is_valid is is_valid
        assert verdict.additional_data == {"max": 3}
        assert verdict.err_msg is None

    @pytest.mark.parametrize(
        "value, is_valid",
        [
            pytest.param("a", False, id="shorter"),
            pytest.param("ab", True, id="equal"),
            pytest.param("abc", True, id="longer"),
            pytest.param(12345, False, id="not sized"),
            pytest.param(None, False, id="None"),
        ],
    )
    def test_min(self, value, is_valid: bool):
        verdict = Min().validate(value, 2, None)
        assert verdict.is_valid is is_valid
        assert verdict.additional_data == {"min": 2}

    @pytest.mark.parametrize("param", ["abc", None, ("1", "2")])
    def test_invalid_param(self, param):
        with pytest.raises(InvalidParameterError, match="max"):
            Max().validate("abc", param, None)


class TestPresence:
    @pytest.mark.parametrize(
        "value, is_valid",
        [
            pytest.param(None, False, id="None"),
            pytest.param("", False, id="empty string"),
            pytest.param([], False, id="empty list"),
            pytest.param({}, False, id="empty dict"),
            pytest.param(bytearray(), False, id="empty bytearray"),
            pytest.param(deque(), False, id="empty deque"),
            pytest.param(EmptySized(), False, id="custom sized"),
            pytest.param(0, True, id="zero"),
            pytest.param(False, True, id="False"),
            pytest.param("x", True, id="string"),
        ],
    )
    def test_required(self, value, is_valid: bool):
        assert Required().validate(value, None, None).is_valid is is_valid

    def test_in(self):
        assert In().validate("b", ("a", "b"), None).is_valid
        assert In().validate(1, (1, 2), None).is_valid
        assert In().validate("a", "a", None).is_valid
        verdict = In().validate("c", ("a", "b"), None)
        assert not verdict.is_valid
        assert verdict.additional_data == {"allowed": "a, b"}
