"""
Trade ledger

Operators log trades, optionally pointing at the signal that prompted them.
The signal link is informational: it is never validated, and a trade may
reference a signal that is unanalyzed or does not exist.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from trading_journal.exceptions import DatabaseError
from trading_journal.models import Trade, TradeResult, utcnow
from trading_journal.repositories import TradeRepository
from trading_journal.schemas.normalized import (
    Parsed,
    parse_decimal,
    parse_optional_decimal,
    parse_optional_int,
    parse_optional_text,
    parse_text,
)
from trading_journal.services.signal_service import (
    DEFAULT_OPERATOR,
    PRICE_DIGITS,
    PRICE_PLACES,
    Clock,
)
from trading_journal.utils.logging import get_logger

logger = get_logger(__name__)

PIPS_PLACES = 2
PIPS_DIGITS = 12


@dataclass(frozen=True)
class TradeEntry:
    """A trade plus the ticker of its linked signal, when the link resolves"""
    trade: Trade
    signal_ticker: Optional[str]


class TradeService:
    """Record and list journal trades"""

    def __init__(self, repository: TradeRepository, clock: Clock = utcnow):
        self.repository = repository
        self._clock = clock

    @classmethod
    def create_with_session(cls, session: Session, clock: Clock = utcnow) -> "TradeService":
        return cls(TradeRepository(session), clock=clock)

    def create(self, fields: Mapping[str, Any]) -> Trade:
        """
        Record a trade from loosely formatted form input.

        Nothing is rejected. Missing pair/direction are stored empty, an
        unparseable entry price as 0, unparseable optional prices as null
        and unparseable pips as 0.
        """
        parsed: dict[str, Parsed] = {
            "signal_id": parse_optional_int(fields.get("signal_id")),
            "pair": parse_text(fields.get("pair"), "", max_length=20),
            "direction": parse_text(fields.get("direction"), "", max_length=10),
            "entry_price": parse_decimal(fields.get("entry_price"), places=PRICE_PLACES, max_digits=PRICE_DIGITS),
            "exit_price": parse_optional_decimal(fields.get("exit_price"), places=PRICE_PLACES, max_digits=PRICE_DIGITS),
            "stop_loss": parse_optional_decimal(fields.get("stop_loss"), places=PRICE_PLACES, max_digits=PRICE_DIGITS),
            "take_profit": parse_optional_decimal(fields.get("take_profit"), places=PRICE_PLACES, max_digits=PRICE_DIGITS),
            "result": parse_text(fields.get("result"), TradeResult.PENDING.value, max_length=20),
            "pips": parse_decimal(fields.get("pips"), places=PIPS_PLACES, max_digits=PIPS_DIGITS),
            "created_by": parse_text(fields.get("created_by"), DEFAULT_OPERATOR, max_length=100),
        }
        # result/pips/created_by have documented defaults; only warn on the rest
        defaulted = [
            name for name, value in parsed.items()
            if value.defaulted and name not in ("result", "pips", "created_by")
        ]
        if defaulted:
            logger.warning(f"Trade fields defaulted or truncated: {', '.join(defaulted)}")

        now = self._clock()
        trade = Trade(
            **{name: value.value for name, value in parsed.items()},
            reasoning=parse_optional_text(fields.get("reasoning")) or "",
            voice_note_url=parse_optional_text(fields.get("voice_note_url")),
            screenshot_url=parse_optional_text(fields.get("screenshot_url")),
            created_at=now,
            updated_at=now,
        )

        try:
            self.repository.save(trade)
            self.repository.commit()
        except SQLAlchemyError as exc:
            self.repository.rollback()
            raise DatabaseError("insert trade", str(exc)) from exc

        logger.info(
            f"Trade created: id={trade.id} {trade.pair} {trade.direction} "
            f"by {trade.created_by} (signal {trade.signal_id})"
        )
        return trade

    def list_trades(self) -> List[TradeEntry]:
        """All trades, newest first, with the linked signal's ticker or None."""
        return [
            TradeEntry(trade=trade, signal_ticker=ticker)
            for trade, ticker in self.repository.list_with_signal_ticker()
        ]
