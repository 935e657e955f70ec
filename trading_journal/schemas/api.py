"""
API request/response schemas
Used as FastAPI request bodies and response models for documentation and validation
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============ Common ============

class ErrorResponse(BaseModel):
    """Error response"""
    error: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: Optional[dict[str, Any]] = Field(None, description="Extra details")


# ============ Webhook ============

class WebhookPayload(BaseModel):
    """
    TradingView alert body.

    Fields are untyped on purpose: the sender's formatting is not trusted and
    the lifecycle engine parses them leniently. Unknown keys are kept.
    """
    auth_token: Optional[Any] = Field(None, description="Shared webhook secret")
    ticker: Optional[Any] = Field(None, description="Instrument, e.g. EURUSD")
    action: Optional[Any] = Field(None, description="buy / sell")
    price: Optional[Any] = Field(None, description="Alert price")
    timestamp: Optional[Any] = Field(None, description="Alert event time")

    model_config = ConfigDict(extra="allow")


class WebhookResponse(BaseModel):
    success: bool = True
    message: str = "Signal received and processed"
    signal_id: int


# ============ Signals ============

class SignalOut(BaseModel):
    """Signal row"""
    id: int
    ticker: str
    action: str
    price: float
    timestamp: Optional[datetime] = None
    received_at: datetime
    analyzed: bool
    analyzed_by: Optional[str] = None
    analyzed_at: Optional[datetime] = None
    response_time_seconds: Optional[float] = None

    model_config = ConfigDict(from_attributes=True)


class AnalyzeRequest(BaseModel):
    user_name: Optional[str] = Field(None, description="Operator claiming the signal")


class AnalyzeResponse(BaseModel):
    success: bool = True
    signal: SignalOut
    response_time_seconds: float = Field(..., description="Seconds from receipt to analysis")


class SampleSignalResponse(BaseModel):
    message: str = "Test signal created"
    signal: SignalOut


# ============ Trades ============

class TradeCreate(BaseModel):
    """Trade form body; every field is parsed leniently by the ledger."""
    signal_id: Optional[Any] = None
    pair: Optional[Any] = None
    direction: Optional[Any] = None
    entry_price: Optional[Any] = None
    exit_price: Optional[Any] = None
    stop_loss: Optional[Any] = None
    take_profit: Optional[Any] = None
    reasoning: Optional[Any] = None
    voice_note_url: Optional[Any] = None
    screenshot_url: Optional[Any] = None
    result: Optional[Any] = None
    pips: Optional[Any] = None
    created_by: Optional[Any] = None

    model_config = ConfigDict(extra="ignore")


class TradeOut(BaseModel):
    """Trade row"""
    id: int
    signal_id: Optional[int] = None
    pair: str
    direction: str
    entry_price: float
    exit_price: Optional[float] = None
    stop_loss: Optional[float] = None
    take_profit: Optional[float] = None
    reasoning: Optional[str] = None
    voice_note_url: Optional[str] = None
    screenshot_url: Optional[str] = None
    result: str
    pips: float
    created_by: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TradeListItem(TradeOut):
    signal_ticker: Optional[str] = Field(None, description="Ticker of the linked signal, if it resolves")


class TradeCreateResponse(BaseModel):
    success: bool = True
    trade: TradeOut


# ============ Leaderboard ============

class LeaderboardEntry(BaseModel):
    user: str = Field(..., description="Operator name")
    total_signals: int
    average_response_time: float
    fastest_response: float
    slowest_response: float

    model_config = ConfigDict(from_attributes=True)


# ============ Health ============

class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    signals_count: Optional[int] = None
    trades_count: Optional[int] = None
    database: str
    error: Optional[str] = None


__all__ = [
    "ErrorResponse",
    "WebhookPayload",
    "WebhookResponse",
    "SignalOut",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "SampleSignalResponse",
    "TradeCreate",
    "TradeOut",
    "TradeListItem",
    "TradeCreateResponse",
    "LeaderboardEntry",
    "HealthResponse",
]
