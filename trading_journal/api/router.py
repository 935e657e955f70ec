from fastapi import APIRouter

from trading_journal.api import routes_health, routes_leaderboard, routes_signals, routes_trades, routes_webhook

api_router = APIRouter()

api_router.include_router(routes_signals.router, prefix="/signals", tags=["signals"])
api_router.include_router(routes_trades.router, prefix="/trades", tags=["trades"])
api_router.include_router(routes_leaderboard.router, prefix="/leaderboard", tags=["leaderboard"])

# Mounted at the root: external senders and probes use fixed paths
public_router = APIRouter()

public_router.include_router(routes_webhook.router, tags=["webhook"])
public_router.include_router(routes_health.router, tags=["health"])
