"""Load and validate exclusion rule definitions from YAML files."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from ..rules import ExclusionRule, build_rules


@dataclass
class RuleDefinition:
    """Data representation of a rule definition."""

    name: str
    priority: int
    params: Dict[str, Any] = field(default_factory=dict)
    explain_exclude: Optional[str] = None


def _validate_rule(index: int, data: Dict[str, Any]) -> RuleDefinition:
    required = {"name", "priority"}
    missing = required - data.keys()
    if missing:
        raise ValueError(
            f"Rule {index}: missing required fields: {', '.join(sorted(missing))}"
        )

    name = data["name"]
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"Rule {index}: name must be a non-empty string")

    priority = data["priority"]
    if not isinstance(priority, int):
        raise ValueError(f"Rule {index}: priority must be an integer")

    params = data.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"Rule {index}: params must be a mapping")

    return RuleDefinition(
        name=name.strip(),
        priority=priority,
        params=params,
        explain_exclude=data.get("explain_exclude"),
    )


def load_rules(path: str) -> List[RuleDefinition]:
    """Parse a YAML file into :class:`RuleDefinition` objects."""
    with open(path, "r", encoding="utf8") as handle:
        data = yaml.safe_load(handle)

    if not isinstance(data, list):
        raise ValueError("Rule file must contain a list of rule definitions")

    rules: List[RuleDefinition] = []
    for idx, item in enumerate(data, start=1):
        if not isinstance(item, dict):
            raise ValueError(
                f"Rule {idx}: expected mapping but found {type(item).__name__}"
            )
        rules.append(_validate_rule(idx, item))

    return rules


def load_rule_objects(path: str) -> List[ExclusionRule]:
    """Load rule definitions from ``path`` and build rule objects from them."""
    return build_rules(load_rules(path))
