"""
Webhook ingestion gateway

Checks the shared secret on TradingView alerts and hands the alert fields to
the signal lifecycle engine. A rejected alert never creates a signal.
"""

import hmac
from typing import Any, Mapping, Optional

from trading_journal.exceptions import AuthenticationError
from trading_journal.models import Signal
from trading_journal.services.signal_service import SignalService
from trading_journal.utils.logging import get_logger

logger = get_logger(__name__)

SAMPLE_ALERT = {
    "ticker": "EURUSD",
    "action": "buy",
    "price": "1.0850",
}


def verify_webhook_token(provided: Any, secret: str) -> None:
    """
    Raises:
        AuthenticationError: token missing or not equal to ``secret``
    """
    if provided is None or provided == "":
        raise AuthenticationError("Authentication token required")
    if not hmac.compare_digest(str(provided).encode("utf-8"), secret.encode("utf-8")):
        raise AuthenticationError("Invalid authentication token")


class WebhookIngestor:
    """Turn authenticated alert payloads into received signals"""

    def __init__(self, signal_service: SignalService, secret: str):
        self.signal_service = signal_service
        self._secret = secret

    def ingest(self, payload: Mapping[str, Any], header_token: Optional[str] = None) -> Signal:
        """
        Args:
            payload: alert body; ``auth_token`` carries the secret
            header_token: ``X-Webhook-Token`` header, used when the body has no token
        """
        token = payload.get("auth_token")
        if token is None or token == "":
            token = header_token
        verify_webhook_token(token, self._secret)

        logger.info(
            f"Webhook received: ticker={payload.get('ticker')!r} "
            f"action={payload.get('action')!r} price={payload.get('price')!r}"
        )
        return self.signal_service.create(
            ticker=payload.get("ticker"),
            action=payload.get("action"),
            price=payload.get("price"),
            timestamp=payload.get("timestamp"),
        )

    def create_test_signal(self) -> Signal:
        """Insert the canned EURUSD alert, stamped now, without a token."""
        logger.info("Test webhook called")
        return self.signal_service.create(**SAMPLE_ALERT)
