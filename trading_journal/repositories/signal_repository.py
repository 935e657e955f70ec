"""
Signal Repository

Signal persistence, including the conditional update that enforces
exactly-once analysis.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Sequence

from sqlalchemy import Row, desc, func, select, update
from sqlalchemy.orm import Session

from trading_journal.models import Signal
from trading_journal.repositories.base_repository import BaseRepository


class SignalRepository(BaseRepository[Signal]):
    """Data access for the ``signals`` table"""

    def __init__(self, session: Session):
        super().__init__(session, Signal)

    def list_recent_first(self) -> List[Signal]:
        """All signals, newest ``received_at`` first."""
        stmt = select(Signal).order_by(desc(Signal.received_at), desc(Signal.id))
        return list(self.session.execute(stmt).scalars().all())

    def mark_analyzed(
        self,
        signal_id: int,
        analyzed_by: str,
        analyzed_at: datetime,
        response_time_seconds: Decimal,
    ) -> bool:
        """
        Compare-and-set the analysis fields.

        A single UPDATE guarded by ``analyzed = false``: when several callers
        race on the same signal, the store lets exactly one of them match.

        Returns:
            True when this call performed the transition, False when the
            signal is missing or was already analyzed.
        """
        stmt = (
            update(Signal)
            .where(Signal.id == signal_id, Signal.analyzed.is_(False))
            .values(
                analyzed=True,
                analyzed_by=analyzed_by,
                analyzed_at=analyzed_at,
                response_time_seconds=response_time_seconds,
            )
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        return result.rowcount == 1

    def response_time_stats(self) -> Sequence[Row]:
        """
        Per-operator aggregates over analyzed signals.

        Rows expose ``user``, ``total_signals``, ``average_response_time``,
        ``fastest_response`` and ``slowest_response``, fastest average first.
        """
        average = func.avg(Signal.response_time_seconds)
        stmt = (
            select(
                Signal.analyzed_by.label("user"),
                func.count(Signal.id).label("total_signals"),
                average.label("average_response_time"),
                func.min(Signal.response_time_seconds).label("fastest_response"),
                func.max(Signal.response_time_seconds).label("slowest_response"),
            )
            .where(
                Signal.analyzed.is_(True),
                Signal.response_time_seconds.is_not(None),
            )
            .group_by(Signal.analyzed_by)
            .order_by(average.asc(), Signal.analyzed_by.asc())
        )
        return self.session.execute(stmt).all()
