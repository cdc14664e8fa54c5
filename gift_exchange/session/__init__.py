"""Draw session bookkeeping for gift_exchange."""

from .draw_session import MESSAGES, DrawSession

__all__ = ["DrawSession", "MESSAGES"]
