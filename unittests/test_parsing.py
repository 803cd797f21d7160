import pytest
from frozendict import frozendict

from pvrules import FieldConfig, RuleDeclarationError, ValidationEngine, parse_rules
from pvrules.parsing import parse_rule_string


class TestParseRuleString:
    @pytest.mark.parametrize(
        "rule, expected",
        [
            pytest.param("max:3", {"max": 3}, id="int"),
            pytest.param("required", {"required": None}, id="no args"),
            pytest.param("between:1.5,-2", {"between": (1.5, -2)}, id="float and negative int"),
            pytest.param("in:a, b ,c", {"in": ("a", "b", "c")}, id="strings are stripped"),
            pytest.param("required||max:3|", {"required": None, "max": 3}, id="empty tokens"),
            pytest.param(" required | max:3 ", {"required": None, "max": 3}, id="whitespace"),
            pytest.param("", {}, id="empty rule"),
            pytest.param("prefix:DE", {"prefix": "DE"}, id="string"),
        ],
    )
    def test_parse(self, rule: str, expected: dict):
        assert parse_rule_string("field", rule, FieldConfig()) == expected

    def test_order_is_kept(self):
        params = parse_rule_string("field", "min:1|required|max:3", FieldConfig())
        assert isinstance(params, frozendict)
        assert list(params) == ["min", "required", "max"]

    def test_flags(self):
        config = FieldConfig()
        params = parse_rule_string("field", "bail|omitempty|max:3", config)
        assert params == {"max": 3}
        assert config.stop_on_error == {"field": True}
        assert config.omit_empty == {"field": True}


class TestParseRules:
    def test_nested_engines_pass_through(self):
        nested = ValidationEngine()
        normalized = parse_rules({"name": "max:3", "address": nested}, FieldConfig())
        assert normalized == {"name": {"max": 3}, "address": nested}
        assert normalized["address"] is nested

    def test_is_deterministic(self):
        rules = {"name": "bail|max:3", "city": "required"}
        first_config, second_config = FieldConfig(), FieldConfig()
        assert parse_rules(rules, first_config) == parse_rules(rules, second_config)
        assert first_config == second_config

    def test_invalid_declaration(self):
        with pytest.raises(RuleDeclarationError, match="name"):
            parse_rules({"name": 42}, FieldConfig())
