"""
Concurrent analyze calls against a file-backed SQLite store.

Each worker uses its own session and connection, as separate requests do.
"""

import threading

import pytest

from trading_journal.database import Database, build_engine
from trading_journal.exceptions import AlreadyAnalyzedError
from trading_journal.services import SignalService

WORKERS = 8


@pytest.fixture
def database(tmp_path):
    database = Database(build_engine(f"sqlite:///{tmp_path / 'journal.db'}"))
    database.create_all()
    yield database
    database.dispose()


def test_exactly_one_concurrent_analyze_succeeds(database):
    with database.session_scope() as session:
        signal_id = SignalService.create_with_session(session).create("EURUSD", "buy", "1.0850").id

    barrier = threading.Barrier(WORKERS)
    winners: list = []
    losers: list = []
    errors: list = []

    def worker(operator: str) -> None:
        session = database.session()
        try:
            service = SignalService.create_with_session(session)
            barrier.wait()
            service.analyze(signal_id, operator)
            winners.append(operator)
        except AlreadyAnalyzedError:
            losers.append(operator)
        except Exception as exc:  # surfaced through the assertion below
            errors.append(exc)
        finally:
            session.close()

    threads = [threading.Thread(target=worker, args=(f"operator-{i}",)) for i in range(WORKERS)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=60)

    assert errors == []
    assert len(winners) == 1
    assert len(losers) == WORKERS - 1

    with database.session_scope() as session:
        stored = SignalService.create_with_session(session).get(signal_id)
        assert stored.analyzed is True
        assert stored.analyzed_by == winners[0]
