"""
Enum definitions for models
"""
from enum import Enum


class SignalAction(str, Enum):
    """Alert direction. Unknown actions are stored verbatim."""
    BUY = "buy"
    SELL = "sell"


class SignalState(str, Enum):
    """Lifecycle state derived from the ``analyzed`` flag"""
    RECEIVED = "received"
    ANALYZED = "analyzed"


class TradeResult(str, Enum):
    """Known trade outcomes. The column accepts any string."""
    PENDING = "pending"
    CLOSED_WIN = "closed-win"
    CLOSED_LOSS = "closed-loss"


__all__ = [
    "SignalAction",
    "SignalState",
    "TradeResult",
]
