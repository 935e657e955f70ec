"""
Service health check
Reports row counts and whether the database answers.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from trading_journal.api.dependencies import get_health_service
from trading_journal.exceptions import StoreUnreachableError
from trading_journal.models import utcnow
from trading_journal.schemas import HealthResponse
from trading_journal.services import HealthService

router = APIRouter()


@router.get("/health", response_model=HealthResponse, responses={503: {"model": HealthResponse}})
def health_check(service: HealthService = Depends(get_health_service)):
    try:
        report = service.check()
    except StoreUnreachableError:
        body = HealthResponse(
            status="unhealthy",
            timestamp=utcnow(),
            database="disconnected",
            error="Database connection failed",
        )
        return JSONResponse(status_code=503, content=body.model_dump(mode="json"))

    return HealthResponse(
        status="healthy",
        timestamp=report.timestamp,
        signals_count=report.signals_count,
        trades_count=report.trades_count,
        database="connected",
    )
