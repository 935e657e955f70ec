"""
TradingView webhook ingestion
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from trading_journal.api.auth import webhook_header_token
from trading_journal.api.dependencies import get_webhook_ingestor
from trading_journal.api.rate_limit import limiter
from trading_journal.config import get_settings
from trading_journal.exceptions import EndpointDisabledError
from trading_journal.schemas import (
    ErrorResponse,
    SampleSignalResponse,
    SignalOut,
    WebhookPayload,
    WebhookResponse,
)
from trading_journal.services import WebhookIngestor

router = APIRouter()


@router.post(
    "/webhook/tradingview",
    response_model=WebhookResponse,
    responses={401: {"model": ErrorResponse}},
)
@limiter.limit(get_settings().webhook_rate_limit)
def tradingview_webhook(
    request: Request,
    payload: WebhookPayload,
    header_token: Optional[str] = Depends(webhook_header_token),
    ingestor: WebhookIngestor = Depends(get_webhook_ingestor),
):
    """
    Receive a TradingView alert.

    The alert body must carry ``auth_token`` (or the ``X-Webhook-Token``
    header) matching TRADINGVIEW_WEBHOOK_SECRET; otherwise 401 and nothing
    is stored.
    """
    signal = ingestor.ingest(payload.model_dump(), header_token=header_token)
    return WebhookResponse(signal_id=signal.id)


@router.post(
    "/test-webhook",
    response_model=SampleSignalResponse,
    responses={404: {"model": ErrorResponse}},
)
def sample_webhook(ingestor: WebhookIngestor = Depends(get_webhook_ingestor)):
    """Create a canned EURUSD signal for dashboard smoke tests."""
    if not get_settings().enable_test_webhook:
        raise EndpointDisabledError("/test-webhook")
    signal = ingestor.create_test_signal()
    return SampleSignalResponse(signal=SignalOut.model_validate(signal))
