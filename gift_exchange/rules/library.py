from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple

from gift_exchange.models.participant import Participant

from .base import ExclusionRule


def valid_pair(giver: Participant, receiver: Participant) -> bool:
    """Default exclusion rule: members of the same group never pair up."""
    return giver.group != receiver.group


@dataclass
class DifferentGroupRule(ExclusionRule):
    """Disallow pairings inside the same group."""

    slug = "different_group"

    def allows(self, giver: Participant, receiver: Participant) -> bool:
        return valid_pair(giver, receiver)


@dataclass
class NotSelfRule(ExclusionRule):
    """Disallow drawing yourself.

    Only matters when groups are left blank or a custom rule set omits
    ``different_group``.
    """

    slug = "not_self"

    def allows(self, giver: Participant, receiver: Participant) -> bool:
        return giver != receiver


@dataclass
class AvoidPairingsRule(ExclusionRule):
    """Disallow specific giver/receiver name pairs, e.g. last year's draw.

    ``params["pairs"]`` is a list of ``{giver: ..., receiver: ...}`` mappings.
    """

    slug = "avoid_pairings"

    def __post_init__(self) -> None:
        pairs = self.params.get("pairs") or []
        if not isinstance(pairs, list):
            raise ValueError("avoid_pairings: 'pairs' must be a list")
        blocked = set()
        for entry in pairs:
            if not isinstance(entry, dict) or not {"giver", "receiver"} <= entry.keys():
                raise ValueError(
                    "avoid_pairings: each entry needs 'giver' and 'receiver'"
                )
            blocked.add((str(entry["giver"]).strip(), str(entry["receiver"]).strip()))
        self._blocked: FrozenSet[Tuple[str, str]] = frozenset(blocked)

    def allows(self, giver: Participant, receiver: Participant) -> bool:
        return (giver.name, receiver.name) not in self._blocked
