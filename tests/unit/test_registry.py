"""
Unit Tests for the Rule Registry
================================

Test Coverage
-------------
- Tag mapping and framework registration
- Config-driven factory parameters
- check() and validate() helpers
"""

import pytest

from eosvalidate.core.exceptions import RuleNotFoundError, ValidationError
from eosvalidate.validation.registry import (
    DEPRECATED_TAGS,
    RULE_TAGS,
    build_rules,
    check,
    get_rule,
    iter_tags,
    register_rules,
    validate,
)
from eosvalidate.validation.rules import eos_name_rule, hex_rule


@pytest.mark.unit
class TestBuildRules:
    """Test build_rules()."""

    def test_every_tag_has_a_rule(self):
        rules = build_rules()
        assert set(rules) == set(RULE_TAGS)

    def test_scalar_rules_are_catalog_functions(self):
        rules = build_rules()
        assert rules["eos_name"] is eos_name_rule
        assert rules["hex"] is hex_rule

    def test_explicit_parameters(self):
        rules = build_rules(names_list_delimiter=",", names_list_max_count=1)

        assert rules["eos_names_list"]("f", "eos_names_list", "", "a") is None
        error = rules["eos_names_list"]("f", "eos_names_list", "", "a,b")
        assert error.message == "The f field must have at most 1 element"

    def test_date_time_layout_parameter(self):
        rules = build_rules(date_time_layout="%Y-%m-%d")
        assert rules["date_time"]("d", "date_time", "", "2020-02-29") is None

    def test_parameters_default_to_config(self, config_env):
        from eosvalidate.core.config import Config

        config_env.setenv("NAMES_LIST_DELIMITER", ";")
        config_env.setenv("EXTENDED_NAMES_LIST_MAX_COUNT", "2")
        Config.reset()

        rules = build_rules()

        assert rules["eos_names_list"]("f", "eos_names_list", "", "eosio;eosio.token") is None
        error = rules["eos_extended_names_list"]("f", "eos_extended_names_list", "", "a;EOS;b")
        assert error.message == "The f field must have at most 2 elements"


@pytest.mark.unit
class TestRegisterRules:
    """Test register_rules()."""

    def test_registers_every_tag(self):
        registered = {}

        tags = register_rules(registered.__setitem__)

        assert tags == list(RULE_TAGS)
        assert set(registered) == set(RULE_TAGS)

    def test_skip_deprecated(self):
        registered = {}

        tags = register_rules(registered.__setitem__, include_deprecated=False)

        assert not set(tags) & set(DEPRECATED_TAGS)
        assert "hex" in registered

    def test_custom_mapping(self):
        calls = []

        register_rules(lambda tag, rule: calls.append((tag, rule)), rules={"hex": hex_rule})

        assert calls == [("hex", hex_rule)]

    def test_iter_tags(self):
        assert list(iter_tags()) == list(RULE_TAGS)
        assert "hex_rows" not in list(iter_tags(include_deprecated=False))


@pytest.mark.unit
class TestCheck:
    """Test get_rule() and check()."""

    def test_unknown_tag(self):
        with pytest.raises(RuleNotFoundError) as exc_info:
            get_rule("eos_asset")

        assert exc_info.value.tag == "eos_asset"
        assert exc_info.value.error_code == "RULE_NOT_FOUND"

    def test_check_passes(self):
        check("eos_name", "account", "eosio.token")

    def test_check_raises_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            check("eos_block_num", "block", "12a")

        assert str(exc_info.value) == "The block field must be a valid EOS block num"
        assert exc_info.value.field == "block"

    def test_check_custom_message(self):
        with pytest.raises(ValidationError, match="^pick a real block$"):
            check("eos_block_num", "block", "12a", message="pick a real block")

    def test_check_list_value(self):
        with pytest.raises(ValidationError) as exc_info:
            check("hex_slice", "rows", ["ab", "x"])

        assert exc_info.value.field == "rows[1]"


@pytest.mark.unit
class TestValidate:
    """Test validate()."""

    SCHEMA = {
        "account": "eos_name",
        "block_num": "eos_block_num",
        "cursor": "cursor",
        "rows": "hex_slice",
    }

    def test_all_valid(self):
        values = {"account": "eosio", "block_num": "42", "cursor": "", "rows": ["ab"]}
        assert validate(values, self.SCHEMA) == {}

    def test_collects_errors_per_field(self):
        values = {"account": "EOSIO", "block_num": "42", "cursor": "abc", "rows": ["ab", "z"]}

        errors = validate(values, self.SCHEMA)

        assert set(errors) == {"account", "cursor", "rows"}
        assert str(errors["account"]) == "The account field must be a valid EOS name"
        assert str(errors["cursor"]) == "The cursor field is not a valid cursor"
        assert str(errors["rows"]) == "The rows[1] field must be a valid hexadecimal"

    def test_missing_fields_are_skipped(self):
        assert validate({"account": "eosio"}, self.SCHEMA) == {}

    def test_unknown_tag_fails_before_checking(self):
        with pytest.raises(RuleNotFoundError):
            validate({"account": "eosio"}, {"account": "eos_name", "x": "nope"})


@pytest.mark.unit
class TestPublicApi:
    """Test the top-level re-exports."""

    def test_top_level_exports_validation_package(self):
        import eosvalidate
        import eosvalidate.validation

        assert set(eosvalidate.validation.__all__) <= set(eosvalidate.__all__)
        for name in eosvalidate.__all__:
            assert hasattr(eosvalidate, name), name
