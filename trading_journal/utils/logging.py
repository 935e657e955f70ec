import logging
from pathlib import Path
from typing import Optional

from trading_journal.config import Settings, get_settings

LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
)


def configure_logging(settings: Optional[Settings] = None, level: int = logging.INFO) -> None:
    """Configure root logger with console and file handlers."""
    settings = settings or get_settings()
    log_dir: Path = settings.logs_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_dir / "service.log", encoding="utf-8"),
        ],
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Use __name__ as the logger name in each module:
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)


LOGGER = logging.getLogger("trading_journal")
