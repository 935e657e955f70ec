"""
Repositories - SQLAlchemy data access per table
"""

from trading_journal.repositories.base_repository import BaseRepository
from trading_journal.repositories.signal_repository import SignalRepository
from trading_journal.repositories.trade_repository import TradeRepository

__all__ = ["BaseRepository", "SignalRepository", "TradeRepository"]
