"""Utilities for exporting drawn pairs.

Results are written in draw order. YAML output is a list of
``{giver, giver_group, receiver, receiver_group}`` mappings; CSV output uses
the same keys as columns.
"""
from __future__ import annotations

import csv
from typing import Dict, List, Sequence

import yaml

from ..models.pair import Pair

FIELDNAMES = ["giver", "giver_group", "receiver", "receiver_group"]


def format_results(pairs: Sequence[Pair]) -> List[Dict[str, str]]:
    """Return drawn pairs as flat rows.

    Parameters
    ----------
    pairs:
        Pairs in the order they were drawn.

    Returns
    -------
    list[dict[str, str]]
        One row per pair keyed by :data:`FIELDNAMES`.
    """
    return [
        {
            "giver": pair.giver.name,
            "giver_group": pair.giver.group,
            "receiver": pair.receiver.name,
            "receiver_group": pair.receiver.group,
        }
        for pair in pairs
    ]


def export_yaml(pairs: Sequence[Pair], results_file: str) -> None:
    """Write drawn pairs to ``results_file`` as YAML."""
    with open(results_file, "w", encoding="utf8") as handle:
        yaml.safe_dump(format_results(pairs), handle, sort_keys=False)


def export_csv(pairs: Sequence[Pair], results_file: str) -> None:
    """Write drawn pairs to ``results_file`` as CSV with a header row."""
    with open(results_file, "w", newline="", encoding="utf8") as handle:
        writer = csv.DictWriter(handle, fieldnames=FIELDNAMES)
        writer.writeheader()
        writer.writerows(format_results(pairs))
