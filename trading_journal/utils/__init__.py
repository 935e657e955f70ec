"""
Shared helpers such as logging configuration.
"""

from trading_journal.utils.logging import LOGGER, configure_logging, get_logger

__all__ = ["LOGGER", "configure_logging", "get_logger"]
