"""FastAPI application setup module."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from report_api.settings import settings
from report_api.database.database import RecordStore
from report_api.endpoints.transactions import router as transactions_router
from report_api.endpoints.statistics import router as statistics_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def create_app(
    store: Optional[RecordStore] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """Build the application.

    A store or HTTP client passed in is used as-is and left open; anything
    not passed in is created on startup and closed on shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned_store = app.state.store is None
        owned_client = app.state.http_client is None
        if owned_store:
            app.state.store = RecordStore(settings.DATABASE_URL, echo=settings.DEBUG)
        if owned_client:
            app.state.http_client = httpx.AsyncClient(timeout=settings.SEED_TIMEOUT_SECONDS)
        await app.state.store.create_schema()
        logger.info("Record store ready")
        try:
            yield
        finally:
            if owned_client:
                await app.state.http_client.aclose()
                app.state.http_client = None
            if owned_store:
                await app.state.store.dispose()
                app.state.store = None

    app = FastAPI(
        title="Transaction Report API",
        description="Monthly transaction listing, statistics and chart data",
        version="1.0.0",
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.http_client = http_client

    # CORS middleware for the dashboard
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(transactions_router)
    app.include_router(statistics_router)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        return JSONResponse(status_code=422, content={"error": message})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.get("/")
    async def root():
        """Welcome message."""
        return {
            "message": "Welcome to the Transaction API. "
            "Use /api/initialize-database to set up the database."
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("report_api.app:app", host=settings.SERVER_HOST, port=settings.SERVER_PORT)
