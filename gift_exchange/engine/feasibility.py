"""Backtracking check for a complete giver/receiver matching."""
from __future__ import annotations

from typing import Callable, List

from ..models.participant import Participant


def valid_solution_exists(
    givers: List[Participant],
    receivers: List[Participant],
    validate: Callable[[Participant, Participant], bool],
) -> bool:
    """Return ``True`` if every giver can be matched to a distinct receiver.

    Givers are consumed from the end of the list and receivers are tried in
    ascending index order. The lists are mutated while searching but are
    always restored, contents and order, before returning. Receivers may be
    left over once all givers are matched.

    The search is exhaustive, so its cost grows factorially with the pool
    size. It is meant for hand-curated rosters of a few dozen people.
    """
    if not givers:
        return True

    giver = givers.pop()
    try:
        candidates = [
            idx for idx, receiver in enumerate(receivers) if validate(giver, receiver)
        ]
        for idx in candidates:
            receiver = receivers.pop(idx)
            try:
                if valid_solution_exists(givers, receivers, validate):
                    return True
            finally:
                receivers.insert(idx, receiver)
        return False
    finally:
        givers.append(giver)
