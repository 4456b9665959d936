"""
show_if evaluation tests
"""

import pytest

from adminkit.fields.conditions import evaluate_conditions


def rule(operator, value=None, field="mode"):
    return {"field": field, "operator": operator, "value": value}


class TestSingleCondition:
    @pytest.mark.parametrize(
        "operator,current,expected,visible",
        [
            ("===", "ga4", "ga4", True),
            ("===", "1", 1, False),
            ("==", "1", 1, True),
            ("!==", "1", 1, True),
            ("!=", "1", 1, False),
            (">", "10", 5, True),
            ("<", 3, "5", True),
            (">=", 5, 5, True),
            ("<=", 6, 5, False),
            (">", "abc", 5, False),
            ("contains", "google tag manager", "tag", True),
            ("in", "gtm", ["ga4", "gtm"], True),
            ("not_in", "gtm", ["ga4"], True),
        ],
    )
    def test_operators(self, operator, current, expected, visible):
        assert evaluate_conditions(rule(operator, expected), {"mode": current}) is visible

    def test_empty_and_not_empty(self):
        assert evaluate_conditions(rule("empty"), {"mode": ""}) is True
        assert evaluate_conditions(rule("empty"), {"mode": "0"}) is True
        assert evaluate_conditions(rule("not_empty"), {"mode": "x"}) is True
        assert evaluate_conditions(rule("not_empty"), {"mode": []}) is False

    def test_missing_field_reads_as_empty_string(self):
        assert evaluate_conditions(rule("===", ""), {}) is True
        assert evaluate_conditions(rule("empty"), {}) is True

    def test_default_operator_is_strict_equality(self):
        assert evaluate_conditions({"field": "mode", "value": "a"}, {"mode": "a"}) is True


class TestConditionGroups:
    def test_no_rule_is_visible(self):
        assert evaluate_conditions(None, {}) is True
        assert evaluate_conditions({}, {}) is True

    def test_list_requires_all(self):
        show_if = [rule("===", "a"), rule("===", "1", field="agree")]
        assert evaluate_conditions(show_if, {"mode": "a", "agree": "1"}) is True
        assert evaluate_conditions(show_if, {"mode": "a", "agree": ""}) is False

    def test_or_relation(self):
        show_if = {"relation": "OR", "0": rule("===", "a"), "1": rule("===", "b")}
        assert evaluate_conditions(show_if, {"mode": "b"}) is True
        assert evaluate_conditions(show_if, {"mode": "c"}) is False

    def test_and_relation(self):
        show_if = {"relation": "and", "0": rule("!=", ""), "1": rule("!==", "b")}
        assert evaluate_conditions(show_if, {"mode": "a"}) is True
        assert evaluate_conditions(show_if, {"mode": "b"}) is False

    def test_unknown_operator_is_visible(self):
        assert evaluate_conditions(rule("matches", "x"), {"mode": "y"}) is True

    def test_malformed_rule_is_visible(self):
        assert evaluate_conditions("mode=a", {"mode": "b"}) is True
        assert evaluate_conditions({"value": "a"}, {"mode": "b"}) is True
