"""Exclusion rules for gift_exchange."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict, List, Sequence, Type

from gift_exchange.models.participant import Participant

from .base import ExclusionRule
from .library import AvoidPairingsRule, DifferentGroupRule, NotSelfRule, valid_pair

if TYPE_CHECKING:  # pragma: no cover - for type checkers only
    from gift_exchange.io.rule_loader import RuleDefinition


Predicate = Callable[[Participant, Participant], bool]

RULE_REGISTRY: Dict[str, Type[ExclusionRule]] = {
    DifferentGroupRule.slug: DifferentGroupRule,
    NotSelfRule.slug: NotSelfRule,
    AvoidPairingsRule.slug: AvoidPairingsRule,
}


def create_rule(defn: "RuleDefinition") -> ExclusionRule:
    """Instantiate a concrete :class:`ExclusionRule` from a :class:`RuleDefinition`."""
    cls = RULE_REGISTRY.get(defn.name)
    if cls is None:
        raise KeyError(f"Unknown rule: {defn.name}")
    return cls(
        name=defn.name,
        priority=defn.priority,
        params=defn.params,
        explain_exclude=defn.explain_exclude,
    )


def build_rules(definitions: List["RuleDefinition"]) -> List[ExclusionRule]:
    """Build and sort rule objects from definitions."""
    rules = [create_rule(d) for d in definitions]
    return sorted(rules, key=lambda r: r.priority)


def default_rules() -> List[ExclusionRule]:
    """Rules used when no rule file is given: groups must differ."""
    return [DifferentGroupRule(name=DifferentGroupRule.slug)]


def combine(rules: Sequence[Predicate]) -> Predicate:
    """Return a predicate allowing a pairing only if every rule allows it.

    With no rules the default :func:`valid_pair` is used.
    """
    if not rules:
        return valid_pair
    checks = list(rules)

    def predicate(giver: Participant, receiver: Participant) -> bool:
        return all(rule(giver, receiver) for rule in checks)

    return predicate


__all__ = [
    "Predicate",
    "ExclusionRule",
    "DifferentGroupRule",
    "NotSelfRule",
    "AvoidPairingsRule",
    "valid_pair",
    "create_rule",
    "build_rules",
    "default_rules",
    "combine",
]
