from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from trading_journal.api.rate_limit import limiter
from trading_journal.api.router import api_router, public_router
from trading_journal.config import get_settings
from trading_journal.exceptions import (
    AuthenticationError,
    BusinessLogicError,
    DatabaseError,
    DataNotFoundError,
    JournalBaseException,
    LifecycleError,
    ServiceUnavailableError,
)
from trading_journal.lifecycle import lifespan
from trading_journal.utils.logging import configure_logging, get_logger

settings = get_settings()
logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Instantiate the FastAPI application with routing and middleware."""
    configure_logging(settings)

    application = FastAPI(
        title="Trading Journal API",
        version="0.1.0",
        description="TradingView signal intake, operator response timing and trade journal.",
        lifespan=lifespan,
    )

    # Rate limiting
    application.state.limiter = limiter
    application.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Webhook-Token"],
    )

    # Register exception handlers
    register_exception_handlers(application)

    application.include_router(public_router)
    application.include_router(api_router, prefix=settings.api_prefix)

    return application


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers for business exceptions."""

    @app.exception_handler(DataNotFoundError)
    async def data_not_found_handler(request: Request, exc: DataNotFoundError) -> JSONResponse:
        """Handle data not found errors with 404 status."""
        logger.warning(f"Data not found: {exc.message}")
        return JSONResponse(
            status_code=404,
            content=exc.to_dict()
        )

    @app.exception_handler(LifecycleError)
    async def lifecycle_error_handler(request: Request, exc: LifecycleError) -> JSONResponse:
        """Handle illegal signal transitions (e.g. a second analyze) with 400 status."""
        logger.warning(f"Lifecycle error: {exc.message}")
        return JSONResponse(
            status_code=400,
            content=exc.to_dict()
        )

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError) -> JSONResponse:
        """Handle authentication errors with 401 status."""
        logger.warning(f"Authentication error: {exc.message}")
        return JSONResponse(
            status_code=401,
            content=exc.to_dict()
        )

    @app.exception_handler(ServiceUnavailableError)
    async def service_unavailable_handler(request: Request, exc: ServiceUnavailableError) -> JSONResponse:
        """Handle service unavailable errors with 503 status."""
        logger.error(f"Service unavailable: {exc.message}")
        return JSONResponse(
            status_code=503,
            content=exc.to_dict()
        )

    @app.exception_handler(DatabaseError)
    async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
        """Handle database errors with 500 status."""
        logger.error(f"Database error: {exc.message}", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=exc.to_dict()
        )

    @app.exception_handler(BusinessLogicError)
    async def business_logic_error_handler(request: Request, exc: BusinessLogicError) -> JSONResponse:
        """Handle business logic errors with 422 status."""
        logger.warning(f"Business logic error: {exc.message}")
        return JSONResponse(
            status_code=422,
            content=exc.to_dict()
        )

    @app.exception_handler(JournalBaseException)
    async def base_exception_handler(request: Request, exc: JournalBaseException) -> JSONResponse:
        """Catch-all handler for any custom business exception."""
        logger.error(f"Unhandled business exception: {exc.message}", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content=exc.to_dict()
        )


app = create_app()
