from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from trading_journal.config import get_settings
from trading_journal.services import (
    HealthService,
    LeaderboardService,
    SignalService,
    TradeService,
    WebhookIngestor,
)


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Request-scoped database session (dependency injection)

    The session comes from the Database opened by the application lifespan
    and is closed when the request finishes.

        @router.get("/endpoint")
        def endpoint(db: Session = Depends(get_db)):
            ...
    """
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()


def get_signal_service(db: Session = Depends(get_db)) -> SignalService:
    return SignalService.create_with_session(db)


def get_trade_service(db: Session = Depends(get_db)) -> TradeService:
    return TradeService.create_with_session(db)


def get_leaderboard_service(db: Session = Depends(get_db)) -> LeaderboardService:
    return LeaderboardService.create_with_session(db)


def get_health_service(db: Session = Depends(get_db)) -> HealthService:
    return HealthService(db)


def get_webhook_ingestor(
    signal_service: SignalService = Depends(get_signal_service),
) -> WebhookIngestor:
    return WebhookIngestor(signal_service, secret=get_settings().webhook_secret)
