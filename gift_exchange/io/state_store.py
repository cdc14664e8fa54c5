"""Persist a :class:`~gift_exchange.session.DrawSession` as YAML.

The file holds the roster, both remaining pools of the hat, the pairs drawn
so far, the last message and the path of the rule file in use, so an
interrupted draw can be resumed where it stopped.
"""
from __future__ import annotations

import os
import random
from typing import Any, Dict, List, Optional

import yaml

from ..engine.hat import Hat
from ..models.pair import Pair
from ..models.participant import Participant
from ..rules import Predicate, valid_pair
from ..session import DrawSession


def _dump_people(people) -> List[Dict[str, str]]:
    return [{"name": p.name, "group": p.group} for p in people]


def _load_people(key: str, data: Any) -> List[Participant]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"State '{key}' must be a list")
    people: List[Participant] = []
    for idx, item in enumerate(data, start=1):
        if not isinstance(item, dict) or "name" not in item:
            raise ValueError(f"State '{key}' entry {idx}: expected mapping with a name")
        people.append(
            Participant(name=str(item["name"]), group=str(item.get("group") or ""))
        )
    return people


def session_to_dict(session: DrawSession) -> Dict[str, Any]:
    """Return a plain mapping describing ``session``."""
    return {
        "roster": _dump_people(session.roster),
        "givers": _dump_people(session.hat.givers),
        "receivers": _dump_people(session.hat.receivers),
        "drawn": [
            {
                "giver": _dump_people([pair.giver])[0],
                "receiver": _dump_people([pair.receiver])[0],
            }
            for pair in session.drawn
        ],
        "message": session.message,
        "rules": session.rules_path,
    }


def session_from_dict(
    data: Dict[str, Any],
    validate: Predicate = valid_pair,
    rng: Optional[random.Random] = None,
) -> DrawSession:
    """Rebuild a :class:`DrawSession` from :func:`session_to_dict` output."""
    if not isinstance(data, dict):
        raise ValueError("State file must contain a mapping")

    drawn_raw = data.get("drawn") or []
    if not isinstance(drawn_raw, list):
        raise ValueError("State 'drawn' must be a list")
    drawn: List[Pair] = []
    for idx, item in enumerate(drawn_raw, start=1):
        if not isinstance(item, dict) or not {"giver", "receiver"} <= item.keys():
            raise ValueError(f"State 'drawn' entry {idx}: needs giver and receiver")
        giver = _load_people("drawn", [item["giver"]])[0]
        receiver = _load_people("drawn", [item["receiver"]])[0]
        drawn.append(Pair(giver=giver, receiver=receiver))

    hat = Hat(
        givers=_load_people("givers", data.get("givers")),
        receivers=_load_people("receivers", data.get("receivers")),
        rng=rng,
    )
    return DrawSession(
        roster=_load_people("roster", data.get("roster")),
        hat=hat,
        drawn=drawn,
        message=data.get("message"),
        validate=validate,
        rules_path=data.get("rules"),
        rng=rng,
    )


def save_session(session: DrawSession, path: str) -> None:
    """Persist ``session`` to ``path`` as YAML."""
    with open(path, "w", encoding="utf8") as handle:
        yaml.safe_dump(session_to_dict(session), handle, sort_keys=False)


def load_session(
    path: str | None,
    validate: Predicate = valid_pair,
    rng: Optional[random.Random] = None,
) -> DrawSession:
    """Load a session from ``path``; a missing file gives an empty session."""
    if not path or not os.path.exists(path):
        return DrawSession(validate=validate, rng=rng)
    with open(path, "r", encoding="utf8") as handle:
        data = yaml.safe_load(handle) or {}
    return session_from_dict(data, validate=validate, rng=rng)
