"""
Schemas: API transport models and lenient input normalization
"""

from trading_journal.schemas.api import (
    AnalyzeRequest,
    AnalyzeResponse,
    ErrorResponse,
    HealthResponse,
    LeaderboardEntry,
    SampleSignalResponse,
    SignalOut,
    TradeCreate,
    TradeCreateResponse,
    TradeListItem,
    TradeOut,
    WebhookPayload,
    WebhookResponse,
)
from trading_journal.schemas.normalized import (
    Parsed,
    parse_decimal,
    parse_optional_decimal,
    parse_optional_int,
    parse_optional_text,
    parse_text,
    parse_timestamp,
    quantize,
)

__all__ = [
    # API schemas
    "AnalyzeRequest",
    "AnalyzeResponse",
    "ErrorResponse",
    "HealthResponse",
    "LeaderboardEntry",
    "SampleSignalResponse",
    "SignalOut",
    "TradeCreate",
    "TradeCreateResponse",
    "TradeListItem",
    "TradeOut",
    "WebhookPayload",
    "WebhookResponse",
    # Normalization
    "Parsed",
    "parse_decimal",
    "parse_optional_decimal",
    "parse_optional_int",
    "parse_optional_text",
    "parse_text",
    "parse_timestamp",
    "quantize",
]
