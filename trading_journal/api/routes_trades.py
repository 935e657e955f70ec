"""
Trade journal endpoints
"""

from typing import List

from fastapi import APIRouter, Depends

from trading_journal.api.dependencies import get_trade_service
from trading_journal.schemas import TradeCreate, TradeCreateResponse, TradeListItem, TradeOut
from trading_journal.services import TradeService

router = APIRouter()


@router.post("", response_model=TradeCreateResponse)
def create_trade(request: TradeCreate, service: TradeService = Depends(get_trade_service)):
    """Log a trade; ``signal_id`` is optional and not checked."""
    trade = service.create(request.model_dump())
    return TradeCreateResponse(trade=TradeOut.model_validate(trade))


@router.get("", response_model=List[TradeListItem])
def list_trades(service: TradeService = Depends(get_trade_service)):
    """All trades, newest first, with ``signal_ticker`` from the linked signal."""
    return [
        TradeListItem.model_validate(
            {**TradeOut.model_validate(entry.trade).model_dump(), "signal_ticker": entry.signal_ticker}
        )
        for entry in service.list_trades()
    ]
