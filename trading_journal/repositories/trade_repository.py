"""
Trade Repository

Trades are read back joined to the ticker of the signal they reference.
"""

from typing import List, Optional, Tuple

from sqlalchemy import desc, select
from sqlalchemy.orm import Session

from trading_journal.models import Signal, Trade
from trading_journal.repositories.base_repository import BaseRepository


class TradeRepository(BaseRepository[Trade]):
    """Data access for the ``trades`` table"""

    def __init__(self, session: Session):
        super().__init__(session, Trade)

    def list_with_signal_ticker(self) -> List[Tuple[Trade, Optional[str]]]:
        """
        All trades, newest first, each paired with its signal's ticker.

        LEFT OUTER JOIN: trades without a signal_id, or whose signal_id
        matches no row, come back with ``None``.
        """
        stmt = (
            select(Trade, Signal.ticker)
            .outerjoin(Signal, Trade.signal_id == Signal.id)
            .order_by(desc(Trade.created_at), desc(Trade.id))
        )
        return [(trade, ticker) for trade, ticker in self.session.execute(stmt).all()]
