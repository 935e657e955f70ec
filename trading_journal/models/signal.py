"""
Signal model - one inbound TradingView alert and its analysis outcome
"""
from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from trading_journal.models.base import Base, utcnow
from trading_journal.models.enums import SignalState


class Signal(Base):
    """Alert awaiting or having undergone operator analysis"""

    __tablename__ = "signals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ticker: Mapped[str] = mapped_column(String(20), nullable=False)
    action: Mapped[str] = mapped_column(String(10), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(18, 5), nullable=False)
    timestamp: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )  # claimed by the alert sender
    received_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )

    # Analysis: all four change together, exactly once
    analyzed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    analyzed_by: Mapped[str | None] = mapped_column(String(100), nullable=True)
    analyzed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    response_time_seconds: Mapped[Decimal | None] = mapped_column(
        Numeric(12, 2), nullable=True
    )

    @property
    def state(self) -> SignalState:
        return SignalState.ANALYZED if self.analyzed else SignalState.RECEIVED

    def __repr__(self) -> str:
        return f"<Signal id={self.id} ticker={self.ticker} action={self.action} state={self.state.value}>"


__all__ = ["Signal"]
