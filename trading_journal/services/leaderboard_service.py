"""
Leaderboard aggregator

Per-operator response-time statistics, derived on every call from the
analyzed signals. Nothing is cached or stored.
"""

from dataclasses import dataclass
from typing import List

from sqlalchemy.orm import Session

from trading_journal.repositories import SignalRepository
from trading_journal.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class OperatorStats:
    user: str
    total_signals: int
    average_response_time: float
    fastest_response: float
    slowest_response: float


class LeaderboardService:
    """Rank operators by average analysis speed"""

    def __init__(self, repository: SignalRepository):
        self.repository = repository

    @classmethod
    def create_with_session(cls, session: Session) -> "LeaderboardService":
        return cls(SignalRepository(session))

    def compute(self) -> List[OperatorStats]:
        """
        Operators ordered by average response time, fastest first.

        Only analyzed signals with a recorded response time count; operators
        without any such signal do not appear.
        """
        stats = [
            OperatorStats(
                user=row.user,
                total_signals=int(row.total_signals),
                average_response_time=float(row.average_response_time),
                fastest_response=float(row.fastest_response),
                slowest_response=float(row.slowest_response),
            )
            for row in self.repository.response_time_stats()
        ]
        logger.debug(f"Leaderboard computed for {len(stats)} operators")
        return stats
