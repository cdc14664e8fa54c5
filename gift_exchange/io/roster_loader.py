"""Utilities for loading :class:`~gift_exchange.models.participant.Participant` rosters from CSV files."""
from __future__ import annotations

import csv
from typing import List

from ..models.participant import Participant


def load_roster(path: str) -> List[Participant]:
    """Load a roster from a CSV file.

    The CSV must contain a ``name`` column and may contain a ``group``
    column. Row order is kept, since it decides the order givers are drawn
    in. Duplicate rows are kept as they are.

    Parameters
    ----------
    path:
        Path to the CSV file.

    Returns
    -------
    list[Participant]
        Participants in file order.

    Raises
    ------
    ValueError
        If the ``name`` column is missing or a row has an empty name.
    """

    with open(path, newline="", encoding="utf8") as handle:
        reader = csv.DictReader(handle)
        fieldnames = reader.fieldnames or []
        required = {"name"}
        missing = required - set(fieldnames)
        if missing:
            raise ValueError(f"Missing required columns: {', '.join(sorted(missing))}")

        roster: List[Participant] = []
        for lineno, row in enumerate(reader, start=2):
            name = (row.get("name") or "").strip()
            if not name:
                raise ValueError(f"Row {lineno}: 'name' is required")
            group = (row.get("group") or "").strip()
            roster.append(Participant(name=name, group=group))

    return roster
