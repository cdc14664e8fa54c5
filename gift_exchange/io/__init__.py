"""Input/output helpers for :mod:`gift_exchange`."""

from .roster_loader import load_roster
from .rule_loader import load_rule_objects, load_rules, RuleDefinition
from .state_store import load_session, save_session

__all__ = [
    "load_roster",
    "load_rule_objects",
    "load_rules",
    "RuleDefinition",
    "load_session",
    "save_session",
]
