"""
Trade model - operator-logged position, optionally tied to a signal
"""
from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from trading_journal.models.base import Base, utcnow
from trading_journal.models.enums import TradeResult


class Trade(Base):
    """Trade journal entry"""

    __tablename__ = "trades"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Plain column, no FK: the signal may be missing or never analyzed
    signal_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)

    pair: Mapped[str] = mapped_column(String(20), nullable=False)
    direction: Mapped[str] = mapped_column(String(10), nullable=False)
    entry_price: Mapped[Decimal] = mapped_column(Numeric(18, 5), nullable=False)
    exit_price: Mapped[Decimal | None] = mapped_column(Numeric(18, 5), nullable=True)
    stop_loss: Mapped[Decimal | None] = mapped_column(Numeric(18, 5), nullable=True)
    take_profit: Mapped[Decimal | None] = mapped_column(Numeric(18, 5), nullable=True)

    reasoning: Mapped[str | None] = mapped_column(Text, nullable=True, default="")
    voice_note_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    screenshot_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    result: Mapped[str] = mapped_column(
        String(20), nullable=False, default=TradeResult.PENDING.value
    )
    pips: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False, default=Decimal("0"))
    created_by: Mapped[str] = mapped_column(String(100), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Trade id={self.id} pair={self.pair} direction={self.direction} signal_id={self.signal_id}>"


__all__ = ["Trade"]
