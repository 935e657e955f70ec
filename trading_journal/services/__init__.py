"""
Domain services: signal lifecycle, trade ledger, leaderboard, ingestion, health
"""

from trading_journal.services.health_service import HealthReport, HealthService
from trading_journal.services.ingestion_service import WebhookIngestor, verify_webhook_token
from trading_journal.services.leaderboard_service import LeaderboardService, OperatorStats
from trading_journal.services.signal_service import (
    AnalysisResult,
    SignalService,
    compute_response_time,
)
from trading_journal.services.trade_service import TradeEntry, TradeService

__all__ = [
    "AnalysisResult",
    "HealthReport",
    "HealthService",
    "LeaderboardService",
    "OperatorStats",
    "SignalService",
    "TradeEntry",
    "TradeService",
    "WebhookIngestor",
    "compute_response_time",
    "verify_webhook_token",
]
