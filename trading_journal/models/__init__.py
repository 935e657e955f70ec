"""
Models package - Unified exports for all models

    from trading_journal.models import Signal, Trade, TradeResult
"""

# Base and utilities
from trading_journal.models.base import Base, as_utc, utcnow

# Enums
from trading_journal.models.enums import (
    SignalAction,
    SignalState,
    TradeResult,
)

# Models
from trading_journal.models.signal import Signal
from trading_journal.models.trade import Trade

__all__ = [
    # Base
    "Base",
    "utcnow",
    "as_utc",
    # Enums
    "SignalAction",
    "SignalState",
    "TradeResult",
    # Models
    "Signal",
    "Trade",
]
