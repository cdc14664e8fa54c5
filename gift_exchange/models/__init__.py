"""Data models for gift_exchange."""

from .participant import Participant
from .pair import Pair

__all__ = ["Participant", "Pair"]
