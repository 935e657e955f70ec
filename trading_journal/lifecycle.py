from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from trading_journal.config import get_settings
from trading_journal.database import Database
from trading_journal.utils.logging import LOGGER


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the database pool on startup and release it on shutdown."""
    settings = get_settings()
    LOGGER.info("Application startup")

    database = Database.from_settings(settings)
    database.create_all()
    database.ping()
    app.state.database = database
    LOGGER.info(f"Database connected ({database.engine.url.get_backend_name()}), tables ready")

    try:
        yield
    finally:
        LOGGER.info("Application shutdown - closing database pool")
        database.dispose()
