"""
Conditional Field Display

Evaluates ``show_if`` rules against a settings mapping. A rule is one of:

    {"field": "analytics_enabled", "operator": "===", "value": "1"}

    [{"field": ...}, {"field": ...}]                  # all must hold

    {"0": {"field": ...}, "1": {"field": ...}, "relation": "OR"}

Malformed rules and unknown operators evaluate to True (the field stays
visible), so a typo never hides a setting for good.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

RELATION_AND = "AND"
RELATION_OR = "OR"


def _to_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return float(value)
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _strict_equal(current: Any, expected: Any) -> bool:
    if _is_number(current) and _is_number(expected):
        return current == expected
    return type(current) is type(expected) and current == expected


def _loose_equal(current: Any, expected: Any) -> bool:
    if current == expected:
        return True
    left, right = _to_float(current), _to_float(expected)
    if left is not None and right is not None:
        return left == right
    return str(current if current is not None else "") == str(expected if expected is not None else "")


def _is_blank(value: Any) -> bool:
    return value is None or value is False or value == "" or value == "0" or value == 0 or value == []


def _compare(current: Any, expected: Any, op) -> bool:
    left, right = _to_float(current), _to_float(expected)
    if left is None or right is None:
        return False
    return op(left, right)


_OPERATORS = {
    "===": _strict_equal,
    "==": _loose_equal,
    "!==": lambda c, e: not _strict_equal(c, e),
    "!=": lambda c, e: not _loose_equal(c, e),
    ">": lambda c, e: _compare(c, e, lambda a, b: a > b),
    "<": lambda c, e: _compare(c, e, lambda a, b: a < b),
    ">=": lambda c, e: _compare(c, e, lambda a, b: a >= b),
    "<=": lambda c, e: _compare(c, e, lambda a, b: a <= b),
    "contains": lambda c, e: isinstance(c, str) and str(e) in c,
    "in": lambda c, e: isinstance(e, (list, tuple)) and c in e,
    "not_in": lambda c, e: isinstance(e, (list, tuple)) and c not in e,
    "empty": lambda c, e: _is_blank(c),
    "not_empty": lambda c, e: not _is_blank(c),
}


def evaluate_condition(condition: Mapping[str, Any], settings: Mapping[str, Any]) -> bool:
    """Evaluate one ``{field, operator, value}`` condition."""
    operator = condition.get("operator", "===")
    check = _OPERATORS.get(operator)
    if check is None:
        logger.debug("Unknown show_if operator %r, treating as visible", operator)
        return True
    current = settings.get(condition["field"], "")
    return bool(check(current, condition.get("value")))


def normalize_conditions(show_if: Any) -> tuple[list[Mapping[str, Any]], str] | None:
    """
    Split a show_if rule into (conditions, relation).

    Returns None when the rule has no recognizable shape.
    """
    if isinstance(show_if, (list, tuple)):
        conditions = [c for c in show_if if isinstance(c, Mapping) and c.get("field")]
        return conditions, RELATION_AND
    if isinstance(show_if, Mapping):
        if show_if.get("field"):
            return [show_if], RELATION_AND
        if "relation" in show_if:
            relation = str(show_if["relation"]).upper()
            conditions = [
                value
                for key, value in show_if.items()
                if key != "relation" and isinstance(value, Mapping) and value.get("field")
            ]
            return conditions, RELATION_OR if relation == RELATION_OR else RELATION_AND
    return None


def evaluate_conditions(show_if: Any, settings: Mapping[str, Any]) -> bool:
    """
    Decide whether a field with the given show_if rule is visible.

    Args:
        show_if:  The field's show_if rule (None or empty means always visible).
        settings: Current values keyed by field id.
    """
    if not show_if:
        return True

    normalized = normalize_conditions(show_if)
    if normalized is None:
        return True

    conditions, relation = normalized
    results = [evaluate_condition(condition, settings) for condition in conditions]

    if relation == RELATION_OR:
        return any(results)
    return all(results)


def condition_fields(show_if: Any) -> set[str]:
    """Ids of the fields a show_if rule reads."""
    if not show_if:
        return set()
    normalized = normalize_conditions(show_if)
    if normalized is None:
        return set()
    return {str(condition["field"]) for condition in normalized[0]}
