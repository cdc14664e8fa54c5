"""The hat: remaining givers and receivers, drawn one pair at a time."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from ..models.pair import Pair
from ..models.participant import Participant
from ..rules.library import valid_pair
from .feasibility import valid_solution_exists

logger = logging.getLogger(__name__)


class DrawError(Enum):
    """Reasons a draw can fail without producing a pair."""

    NO_GIVERS = "no_givers"
    NO_VALID_RECEIVER = "no_valid_receiver"


@dataclass(frozen=True)
class DrawResult:
    """Outcome of :meth:`Hat.draw_name`: exactly one of ``pair``/``error`` is set."""

    pair: Optional[Pair] = None
    error: Optional[DrawError] = None

    @property
    def ok(self) -> bool:
        return self.pair is not None


class Hat:
    """Pools of participants still waiting to give and to receive.

    Every participant starts in both pools. Each successful draw removes one
    giver and one receiver, and only commits a receiver if the pools that
    remain still admit a complete valid matching.
    """

    def __init__(
        self,
        givers: Sequence[Participant] = (),
        receivers: Sequence[Participant] = (),
        rng: Optional[random.Random] = None,
    ) -> None:
        self._givers: List[Participant] = list(givers)
        self._receivers: List[Participant] = list(receivers)
        self._rng = rng if rng is not None else random

    @classmethod
    def with_people(
        cls, people: Sequence[Participant], rng: Optional[random.Random] = None
    ) -> "Hat":
        """Return a hat where everyone in ``people`` is both giver and receiver."""
        return cls(givers=people, receivers=people, rng=rng)

    @property
    def givers(self) -> Tuple[Participant, ...]:
        """Remaining givers; the last one is drawn next."""
        return tuple(self._givers)

    @property
    def receivers(self) -> Tuple[Participant, ...]:
        return tuple(self._receivers)

    def draw_name(
        self,
        validate: Callable[[Participant, Participant], bool] = valid_pair,
    ) -> DrawResult:
        """Draw a receiver for the next giver.

        The giver is taken from the end of the giver pool. Receivers are
        scanned circularly from a random start; the first one that passes
        ``validate`` and leaves a solvable remainder is committed.

        If no receiver works the giver has already been removed and is not
        put back, so the pool ends up one giver short.
        """
        if not self._givers:
            logger.info("No givers left in the hat")
            return DrawResult(error=DrawError.NO_GIVERS)

        giver = self._givers.pop()
        count = len(self._receivers)
        start = self._rng.randrange(count) if count else 0

        for offset in range(count):
            idx = (start + offset) % count
            if not validate(giver, self._receivers[idx]):
                continue

            receiver = self._receivers.pop(idx)
            if valid_solution_exists(self._givers, self._receivers, validate):
                logger.info("Drew %s for %s", receiver.name, giver.name)
                return DrawResult(pair=Pair(giver=giver, receiver=receiver))

            logger.debug(
                "Drawing %s for %s leaves no solution, trying the next receiver",
                receiver.name,
                giver.name,
            )
            self._receivers.insert(idx, receiver)

        logger.warning("No valid receiver for %s", giver.name)
        return DrawResult(error=DrawError.NO_VALID_RECEIVER)
