"""Explain why participants cannot be given a receiver.

Each excluded pairing is described by the first rule that rejects it, using
the rule's ``explain_exclude`` template.
"""
from __future__ import annotations

from typing import Dict, List, Sequence

from ..models.participant import Participant
from ..rules import ExclusionRule


def explain_pairing(
    rules: Sequence[ExclusionRule], giver: Participant, receiver: Participant
) -> str:
    """Return the rationale of the first rule excluding the pairing, or ``""``."""
    for rule in rules:
        rationale = rule.explain(giver, receiver)
        if rationale:
            return rationale
    return ""


def explain_unmatched(
    roster: Sequence[Participant], rules: Sequence[ExclusionRule]
) -> Dict[str, List[str]]:
    """Return exclusion rationales for givers with no legal receiver at all.

    Parameters
    ----------
    roster:
        Participants acting as both givers and receivers.
    rules:
        Rules a pairing must satisfy.

    Returns
    -------
    dict[str, list[str]]
        Mapping of giver name -> one rationale per receiver on the roster.
        Givers with at least one legal receiver are left out.
    """
    unmatched: Dict[str, List[str]] = {}
    for giver in roster:
        reasons = [explain_pairing(rules, giver, receiver) for receiver in roster]
        if all(reasons):
            unmatched[giver.name] = reasons
    return unmatched
