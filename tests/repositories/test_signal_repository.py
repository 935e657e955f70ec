"""
Unit tests for SignalRepository

Covers ordering, the compare-and-set analyze update and leaderboard aggregates.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

from trading_journal.models import Signal
from trading_journal.repositories import SignalRepository

T0 = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _add_signal(session, ticker="EURUSD", received_at=T0, **kwargs):
    signal = Signal(
        ticker=ticker,
        action=kwargs.pop("action", "buy"),
        price=kwargs.pop("price", Decimal("1.08500")),
        received_at=received_at,
        **kwargs,
    )
    session.add(signal)
    session.commit()
    return signal


def _add_analyzed(session, user, seconds, received_at=T0):
    return _add_signal(
        session,
        received_at=received_at,
        analyzed=True,
        analyzed_by=user,
        analyzed_at=received_at + timedelta(seconds=seconds),
        response_time_seconds=Decimal(str(seconds)),
    )


class TestListRecentFirst:

    def test_empty(self, db_session):
        assert SignalRepository(db_session).list_recent_first() == []

    def test_newest_received_first(self, db_session):
        older = _add_signal(db_session, "AAA", received_at=T0)
        newer = _add_signal(db_session, "BBB", received_at=T0 + timedelta(minutes=5))

        ids = [s.id for s in SignalRepository(db_session).list_recent_first()]
        assert ids == [newer.id, older.id]

    def test_ties_broken_by_id(self, db_session):
        first = _add_signal(db_session, "AAA")
        second = _add_signal(db_session, "BBB")

        ids = [s.id for s in SignalRepository(db_session).list_recent_first()]
        assert ids == [second.id, first.id]


class TestMarkAnalyzed:

    def test_first_call_wins(self, db_session):
        signal = _add_signal(db_session)
        repo = SignalRepository(db_session)

        won = repo.mark_analyzed(signal.id, "alice", T0 + timedelta(seconds=5), Decimal("5.00"))
        repo.commit()
        repo.refresh(signal)

        assert won is True
        assert signal.analyzed is True
        assert signal.analyzed_by == "alice"
        assert signal.response_time_seconds == Decimal("5.00")

    def test_second_call_matches_nothing(self, db_session):
        signal = _add_signal(db_session)
        repo = SignalRepository(db_session)
        repo.mark_analyzed(signal.id, "alice", T0, Decimal("1.00"))
        repo.commit()

        assert repo.mark_analyzed(signal.id, "bob", T0, Decimal("2.00")) is False
        repo.rollback()
        repo.refresh(signal)
        assert signal.analyzed_by == "alice"
        assert signal.response_time_seconds == Decimal("1.00")

    def test_missing_signal(self, db_session):
        assert SignalRepository(db_session).mark_analyzed(999, "alice", T0, Decimal("1")) is False


class TestResponseTimeStats:

    def test_empty_when_nothing_analyzed(self, db_session):
        _add_signal(db_session)
        assert SignalRepository(db_session).response_time_stats() == []

    def test_groups_and_orders_by_average(self, db_session):
        _add_analyzed(db_session, "alice", 10)
        _add_analyzed(db_session, "alice", 20)
        _add_analyzed(db_session, "bob", 5)

        rows = SignalRepository(db_session).response_time_stats()

        assert [row.user for row in rows] == ["bob", "alice"]
        alice = rows[1]
        assert alice.total_signals == 2
        assert float(alice.average_response_time) == 15.0
        assert float(alice.fastest_response) == 10.0
        assert float(alice.slowest_response) == 20.0

    def test_equal_averages_ordered_by_name(self, db_session):
        _add_analyzed(db_session, "zed", 7)
        _add_analyzed(db_session, "amy", 7)

        rows = SignalRepository(db_session).response_time_stats()
        assert [row.user for row in rows] == ["amy", "zed"]
