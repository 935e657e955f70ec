"""
Store health probe
"""

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from trading_journal.exceptions import StoreUnreachableError
from trading_journal.models import utcnow
from trading_journal.repositories import SignalRepository, TradeRepository
from trading_journal.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class HealthReport:
    signals_count: int
    trades_count: int
    timestamp: datetime


class HealthService:
    def __init__(self, session: Session):
        self.signals = SignalRepository(session)
        self.trades = TradeRepository(session)

    def check(self) -> HealthReport:
        """Count rows in both tables; any store failure is StoreUnreachableError."""
        try:
            signals_count = self.signals.count()
            trades_count = self.trades.count()
        except SQLAlchemyError as exc:
            logger.error(f"Database connection failed: {exc}")
            raise StoreUnreachableError(str(exc)) from exc
        return HealthReport(
            signals_count=signals_count,
            trades_count=trades_count,
            timestamp=utcnow(),
        )
