from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from ..engine.hat import DrawError, DrawResult, Hat
from ..models.pair import Pair
from ..models.participant import Participant
from ..rules import Predicate, valid_pair

logger = logging.getLogger(__name__)

MESSAGES = {
    DrawError.NO_GIVERS: "No one left to assign",
    DrawError.NO_VALID_RECEIVER: "It isn't possible to assign everyone",
}


@dataclass
class DrawSession:
    """Roster plus an in-progress draw.

    Editing the roster does not touch a draw already under way; call
    :meth:`reset` to start over with the current roster. ``rules_path`` names
    the rule file ``validate`` was built from, so a saved draw resumes with
    the same rules.
    """

    roster: List[Participant] = field(default_factory=list)
    hat: Hat = field(default_factory=Hat)
    drawn: List[Pair] = field(default_factory=list)
    message: Optional[str] = None
    validate: Predicate = valid_pair
    rules_path: Optional[str] = None
    rng: Optional[random.Random] = None

    def reset(self) -> None:
        """Put everyone on the roster back in the hat and forget past draws."""
        self.hat = Hat.with_people(self.roster, rng=self.rng)
        self.drawn.clear()
        self.message = None
        logger.info("Draw restarted with %d participants", len(self.roster))

    def can_draw(self) -> bool:
        return bool(self.hat.givers)

    def draw(self) -> DrawResult:
        """Draw the next pair, recording it or the failure message."""
        self.message = None
        result = self.hat.draw_name(self.validate)
        if result.ok:
            self.drawn.append(result.pair)
        else:
            self.message = MESSAGES[result.error]
        return result

    def draw_all(self) -> List[DrawResult]:
        """Keep drawing until the giver pool is empty."""
        results = []
        while self.can_draw():
            results.append(self.draw())
        return results

    # ------------------------------------------------------------------
    # Roster editing
    # ------------------------------------------------------------------

    def add_person(self, name: str, group: str = "") -> Participant:
        person = Participant(name=name, group=group)
        if not person.name:
            raise ValueError("Participant name is required")
        self.roster.append(person)
        return person

    def remove_person(self, index: int) -> Participant:
        self._check_index(index)
        return self.roster.pop(index)

    def move_up(self, index: int) -> None:
        self._check_index(index)
        if index > 0:
            self._swap(index - 1, index)

    def move_down(self, index: int) -> None:
        self._check_index(index)
        if index < len(self.roster) - 1:
            self._swap(index, index + 1)

    def _swap(self, first: int, second: int) -> None:
        self.roster[first], self.roster[second] = (
            self.roster[second],
            self.roster[first],
        )

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.roster):
            raise ValueError(f"No participant at position {index}")
