from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Participant:
    """A person taking part in the exchange.

    Equality is structural: two participants with the same name and group
    compare equal, there is no separate identifier.
    """

    name: str
    group: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "group", self.group.strip())

    def __str__(self) -> str:
        if self.group:
            return f"{self.name} - {self.group}"
        return self.name
