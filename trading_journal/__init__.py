"""
Core backend package for the TradingView signal journal.
Exposes signal lifecycle, trade ledger, leaderboard and API wiring.
"""

__all__ = [
    "config",
    "database",
    "models",
    "repositories",
    "schemas",
    "services",
    "utils",
]
