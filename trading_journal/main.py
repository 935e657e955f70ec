"""
Entry point for ASGI servers:

    uvicorn trading_journal.main:app

The FastAPI application object lives in `web/app.py`.
"""

from web.app import app  # noqa: F401
