#!/usr/bin/env python3
"""
Send a TradingView-style alert to a running journal server
==========================================================

Usage:
  python scripts/send_test_alert.py                                  # EURUSD buy at 1.0850
  python scripts/send_test_alert.py --ticker GBPUSD --action sell --price 1.2710
  python scripts/send_test_alert.py --url http://localhost:8000 --token my-secret
  python scripts/send_test_alert.py --header                         # token in X-Webhook-Token

The token defaults to TRADINGVIEW_WEBHOOK_SECRET from the environment / .env.
"""

import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path

import httpx

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from trading_journal.config import get_settings


def build_alert(ticker: str, action: str, price: str) -> dict:
    return {
        "ticker": ticker,
        "action": action,
        "price": price,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def send_alert(url: str, alert: dict, token: str, use_header: bool = False, timeout: float = 10.0) -> httpx.Response:
    """POST one alert to /webhook/tradingview."""
    headers = {}
    body = dict(alert)
    if use_header:
        headers["X-Webhook-Token"] = token
    else:
        body["auth_token"] = token

    with httpx.Client(timeout=timeout) as client:
        return client.post(f"{url.rstrip('/')}/webhook/tradingview", json=body, headers=headers)


def main() -> int:
    parser = argparse.ArgumentParser(description="Send a test TradingView alert")
    parser.add_argument("--url", default="http://localhost:8000", help="Server base URL")
    parser.add_argument("--ticker", default="EURUSD")
    parser.add_argument("--action", default="buy", choices=["buy", "sell"])
    parser.add_argument("--price", default="1.0850")
    parser.add_argument("--token", default=None, help="Webhook secret (default: from settings)")
    parser.add_argument("--header", action="store_true", help="Send the token as X-Webhook-Token")
    args = parser.parse_args()

    token = args.token or get_settings().webhook_secret
    alert = build_alert(args.ticker, args.action, args.price)

    try:
        resp = send_alert(args.url, alert, token, use_header=args.header)
    except httpx.HTTPError as exc:
        print(f"❌ Request failed: {exc}", file=sys.stderr)
        return 1

    try:
        body = json.dumps(resp.json(), indent=2, ensure_ascii=False)
    except ValueError:
        body = resp.text
    print(f"{resp.status_code} {body}")
    return 0 if resp.is_success else 1


if __name__ == "__main__":
    sys.exit(main())
