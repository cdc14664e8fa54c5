import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from gift_exchange.models.participant import Participant


class FixedRandom:
    """Random source whose ``randrange`` always starts at the same index."""

    def __init__(self, start: int) -> None:
        self.start = start

    def randrange(self, stop: int) -> int:
        return self.start % stop


@pytest.fixture
def alternating_roster():
    return [
        Participant("A", "1"),
        Participant("B", "2"),
        Participant("C", "1"),
        Participant("D", "2"),
    ]
