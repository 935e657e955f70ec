"""
Signal endpoints: listing and the one-time analyze transition
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends

from trading_journal.api.dependencies import get_signal_service
from trading_journal.schemas import AnalyzeRequest, AnalyzeResponse, ErrorResponse, SignalOut
from trading_journal.services import SignalService

router = APIRouter()


@router.get("", response_model=List[SignalOut])
def list_signals(service: SignalService = Depends(get_signal_service)):
    """All signals, most recently received first."""
    return service.list_signals()


@router.get(
    "/{signal_id}",
    response_model=SignalOut,
    responses={404: {"model": ErrorResponse}},
)
def get_signal(signal_id: int, service: SignalService = Depends(get_signal_service)):
    return service.get(signal_id)


@router.post(
    "/{signal_id}/analyze",
    response_model=AnalyzeResponse,
    responses={404: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)
def analyze_signal(
    signal_id: int,
    request: Optional[AnalyzeRequest] = Body(default=None),
    service: SignalService = Depends(get_signal_service),
):
    """
    Claim a signal for analysis and stop its response-time clock.

    404 when the signal does not exist, 400 when it was already analyzed.
    """
    result = service.analyze(signal_id, request.user_name if request else None)
    return AnalyzeResponse(
        signal=SignalOut.model_validate(result.signal),
        response_time_seconds=float(result.response_time_seconds),
    )
