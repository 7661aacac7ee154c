"""
------------------------------------------------------------------------------
Project:        RouteFlux
File:           core/rules.py
Version:        1.0.0
Description:    Structural equality of response rules. Rules are compared by
                content and collections of rules as multisets.
------------------------------------------------------------------------------
"""

import json
from collections import Counter
from typing import Any, Iterable, Mapping, Union

from core.models import ResponseRule, RouteResponse

RULE_FIELDS = ("target", "modifier", "value", "invert", "operator")

RuleLike = Union[ResponseRule, Mapping[str, Any]]


def serialize_rule(rule: RuleLike) -> str:
    """
    Serialize a rule into a stable string made of its key properties only.

    A field missing from a mapping, or never set on a ResponseRule, is left
    out of the key, so it never equals a rule where the same field is
    explicitly null. A parsed rule keeps the key of its raw mapping.
    """
    if isinstance(rule, ResponseRule):
        payload = rule.model_dump(mode="json", include=set(RULE_FIELDS), exclude_unset=True)
    else:
        payload = {name: rule[name] for name in RULE_FIELDS if name in rule}
    return json.dumps(payload, sort_keys=True, default=str)


def rule_frequency_map(rules: Iterable[RuleLike]) -> Counter:
    """Maps each serialized rule to the number of times it appears."""
    return Counter(serialize_rule(rule) for rule in rules)


def rule_sets_equal(rules_a: Iterable[RuleLike], rules_b: Iterable[RuleLike]) -> bool:
    """
    Strict comparison: both the rules and their counts must match exactly,
    the order does not matter.
    """
    map_a = rule_frequency_map(rules_a)
    map_b = rule_frequency_map(rules_b)

    if len(map_a) != len(map_b):
        return False

    for key in map_a.keys() | map_b.keys():
        if map_a.get(key, 0) != map_b.get(key, 0):
            return False

    return True


def response_has_rules(response: RouteResponse, rules: Iterable[RuleLike]) -> bool:
    """Checks if a route response holds exactly the given rules."""
    return rule_sets_equal(response.rules, rules)
