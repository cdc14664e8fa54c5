"""Reporting utilities for gift_exchange."""

from .rationale import explain_pairing, explain_unmatched
from .results import (
    format_results,
    export_yaml,
    export_csv,
)

__all__ = [
    "format_results",
    "export_yaml",
    "export_csv",
    "explain_pairing",
    "explain_unmatched",
]
