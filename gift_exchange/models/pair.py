from __future__ import annotations

from dataclasses import dataclass

from .participant import Participant


@dataclass(frozen=True)
class Pair:
    """A committed giver -> receiver assignment."""

    giver: Participant
    receiver: Participant

    def __str__(self) -> str:
        return f"{self.giver} ==> {self.receiver}"
