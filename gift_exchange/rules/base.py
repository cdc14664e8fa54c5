from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict

from gift_exchange.models.participant import Participant


@dataclass
class ExclusionRule(ABC):
    """Base class for rules deciding whether a giver may draw a receiver.

    Rule instances are callable, so any rule can be handed directly to
    :meth:`gift_exchange.engine.hat.Hat.draw_name` as the predicate.
    """

    name: str
    priority: int = 0
    params: Dict[str, Any] = field(default_factory=dict)
    explain_exclude: str | None = None

    def __call__(self, giver: Participant, receiver: Participant) -> bool:
        return self.allows(giver, receiver)

    def explain(self, giver: Participant, receiver: Participant) -> str:
        """Return why the pairing is excluded, or ``""`` if it is allowed."""
        if self.allows(giver, receiver):
            return ""
        template = (
            self.explain_exclude
            or f"{giver.name} -> {receiver.name} excluded by {self.name}"
        )
        return template.format(giver=giver, receiver=receiver, params=self.params)

    @abstractmethod
    def allows(self, giver: Participant, receiver: Participant) -> bool:
        """Return ``True`` if ``giver`` may give to ``receiver``."""
