"""
Tests for the webhook ingestion gateway
"""

import pytest

from trading_journal.exceptions import AuthenticationError
from trading_journal.services import SignalService, WebhookIngestor, verify_webhook_token

SECRET = "s3cret"


@pytest.fixture
def signals(db_session, clock):
    return SignalService.create_with_session(db_session, clock=clock)


@pytest.fixture
def ingestor(signals):
    return WebhookIngestor(signals, secret=SECRET)


class TestVerifyWebhookToken:

    def test_matching_token(self):
        verify_webhook_token(SECRET, SECRET)

    @pytest.mark.parametrize("token", [None, ""])
    def test_missing_token(self, token):
        with pytest.raises(AuthenticationError, match="required"):
            verify_webhook_token(token, SECRET)

    def test_wrong_token(self):
        with pytest.raises(AuthenticationError, match="Invalid"):
            verify_webhook_token("guess", SECRET)


class TestIngest:

    def test_authenticated_alert_creates_signal(self, ingestor, signals):
        signal = ingestor.ingest({
            "auth_token": SECRET,
            "ticker": "EURUSD",
            "action": "sell",
            "price": "1.0850",
            "timestamp": "2024-03-01T11:59:00Z",
        })

        assert signal.ticker == "EURUSD"
        assert signal.action == "sell"
        assert [s.id for s in signals.list_signals()] == [signal.id]

    def test_header_token_used_when_body_has_none(self, ingestor):
        signal = ingestor.ingest({"ticker": "EURUSD"}, header_token=SECRET)
        assert signal.id is not None

    @pytest.mark.parametrize("payload,header", [
        ({"ticker": "EURUSD"}, None),
        ({"auth_token": "", "ticker": "EURUSD"}, None),
        ({"auth_token": "wrong", "ticker": "EURUSD"}, None),
        ({"auth_token": "wrong", "ticker": "EURUSD"}, SECRET),
    ])
    def test_rejected_alert_creates_nothing(self, ingestor, signals, payload, header):
        with pytest.raises(AuthenticationError):
            ingestor.ingest(payload, header_token=header)
        assert signals.list_signals() == []

    def test_sample_signal(self, ingestor):
        signal = ingestor.create_test_signal()
        assert signal.ticker == "EURUSD"
        assert signal.action == "buy"
        assert str(signal.price).startswith("1.085")
