"""
Signal lifecycle engine

Signals enter in the ``received`` state and move to ``analyzed`` exactly once,
when an operator claims them. The elapsed time between receipt and analysis
is the operator's response time.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from trading_journal.exceptions import (
    AlreadyAnalyzedError,
    DatabaseError,
    SignalNotFoundError,
)
from trading_journal.models import Signal, SignalAction, as_utc, utcnow
from trading_journal.repositories import SignalRepository
from trading_journal.schemas.normalized import (
    INT32_MAX,
    parse_decimal,
    parse_text,
    parse_timestamp,
    quantize,
)
from trading_journal.utils.logging import get_logger

logger = get_logger(__name__)

Clock = Callable[[], datetime]

DEFAULT_TICKER = "UNKNOWN"
DEFAULT_ACTION = SignalAction.BUY.value
DEFAULT_OPERATOR = "Anonymous"

PRICE_PLACES = 5
PRICE_DIGITS = 18
RESPONSE_TIME_PLACES = 2


def compute_response_time(received_at: datetime, analyzed_at: datetime) -> Decimal:
    """Seconds between receipt and analysis, rounded to 2 places. May be negative under clock skew."""
    elapsed = as_utc(analyzed_at) - as_utc(received_at)
    return quantize(Decimal(str(elapsed.total_seconds())), RESPONSE_TIME_PLACES)


@dataclass(frozen=True)
class AnalysisResult:
    signal: Signal
    response_time_seconds: Decimal


class SignalService:
    """Create, list and analyze signals"""

    def __init__(self, repository: SignalRepository, clock: Clock = utcnow):
        self.repository = repository
        self._clock = clock

    @classmethod
    def create_with_session(cls, session: Session, clock: Clock = utcnow) -> "SignalService":
        return cls(SignalRepository(session), clock=clock)

    def create(
        self,
        ticker: Any = None,
        action: Any = None,
        price: Any = None,
        timestamp: Any = None,
    ) -> Signal:
        """
        Record a new signal in the ``received`` state.

        Malformed input never fails the call: empty ticker becomes UNKNOWN,
        empty action becomes buy, unparseable price becomes 0 and an
        unparseable or missing timestamp becomes the receipt time.
        """
        received_at = self._clock()

        fields = {
            "ticker": parse_text(ticker, DEFAULT_TICKER, max_length=20),
            "action": parse_text(action, DEFAULT_ACTION, max_length=10),
            "price": parse_decimal(price, places=PRICE_PLACES, max_digits=PRICE_DIGITS),
            "timestamp": parse_timestamp(timestamp, lambda: received_at),
        }
        defaulted = [name for name, parsed in fields.items() if parsed.defaulted]
        if defaulted:
            logger.warning(f"Signal fields defaulted or truncated: {', '.join(defaulted)}")

        signal = Signal(
            ticker=fields["ticker"].value,
            action=fields["action"].value,
            price=fields["price"].value,
            timestamp=fields["timestamp"].value,
            received_at=received_at,
            analyzed=False,
        )

        try:
            self.repository.save(signal)
            self.repository.commit()
        except SQLAlchemyError as exc:
            self.repository.rollback()
            raise DatabaseError("insert signal", str(exc)) from exc

        logger.info(f"Signal processed: id={signal.id} {signal.ticker} {signal.action} @ {signal.price}")
        return signal

    def get(self, signal_id: int) -> Signal:
        # ids beyond the INTEGER column cannot exist
        if not 1 <= signal_id <= INT32_MAX:
            raise SignalNotFoundError(signal_id)
        signal = self.repository.find_by_id(signal_id)
        if signal is None:
            raise SignalNotFoundError(signal_id)
        return signal

    def list_signals(self) -> List[Signal]:
        """All signals, most recently received first."""
        return self.repository.list_recent_first()

    def analyze(self, signal_id: int, operator_name: Optional[str] = None) -> AnalysisResult:
        """
        Close a signal's response-time clock.

        Raises:
            SignalNotFoundError: no signal with this id
            AlreadyAnalyzedError: the signal was analyzed before, by anyone,
                including a concurrent call that won the conditional update
        """
        signal = self.get(signal_id)
        if signal.analyzed:
            raise AlreadyAnalyzedError(signal_id, signal.analyzed_by)

        operator = parse_text(operator_name, DEFAULT_OPERATOR, max_length=100).value
        analyzed_at = self._clock()
        response_time = compute_response_time(signal.received_at, analyzed_at)
        if response_time < 0:
            logger.warning(
                f"Negative response time {response_time}s for signal {signal_id}; "
                "received_at is ahead of the server clock"
            )

        try:
            won = self.repository.mark_analyzed(
                signal_id,
                analyzed_by=operator,
                analyzed_at=analyzed_at,
                response_time_seconds=response_time,
            )
            if not won:
                self.repository.rollback()
                self.repository.refresh(signal)
                logger.info(f"Signal {signal_id} lost analyze race to {signal.analyzed_by}")
                raise AlreadyAnalyzedError(signal_id, signal.analyzed_by)
            self.repository.commit()
            self.repository.refresh(signal)
        except SQLAlchemyError as exc:
            self.repository.rollback()
            raise DatabaseError("analyze signal", str(exc)) from exc

        logger.info(f"Signal {signal_id} analyzed by {operator} in {response_time}s")
        return AnalysisResult(signal=signal, response_time_seconds=response_time)
