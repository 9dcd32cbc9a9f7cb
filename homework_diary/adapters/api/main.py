# homework_diary/adapters/api/main.py
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from homework_diary import __version__
from homework_diary.adapters.api.routers import catalog_router, formatting_router, health_router
from homework_diary.core.domain.exceptions import DomainError
from homework_diary.shared.config import AppEnv, settings
from homework_diary.shared.logging_config import configure_logging
from homework_diary.shared.telemetry import instrument_fastapi, setup_telemetry

logger = structlog.get_logger()

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application Lifecycle Manager.
    Handles startup (Telemetry) and shutdown.
    """
    setup_telemetry(settings.OTEL_SERVICE_NAME)
    logger.info("app_startup", app=settings.APP_NAME, env=settings.APP_ENV.value)

    yield

    logger.info("app_shutdown")


def _error_body(code: int, message) -> dict:
    return {"status": "error", "code": code, "message": message}


def create_app() -> FastAPI:
    """
    Factory function to create the FastAPI application.
    """
    configure_logging()

    app = FastAPI(
        title="Homework Diary",
        version=__version__,
        description="Homework activity sentences for the PDF and image renderers",
        docs_url="/docs" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        redoc_url=None,
        lifespan=lifespan,
    )

    # 1. CORS (the image renderer runs in the browser)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 2. Auto-Instrument FastAPI for Tracing
    instrument_fastapi(app)

    # 3. Global Exception Handlers
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Standardizes HTTP errors into the service's error envelope.
        """
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.status_code, exc.detail),
        )

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        logger.error("domain_error", path=request.url.path, error=exc.message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_body(status.HTTP_400_BAD_REQUEST, exc.message),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions to prevent leaking stack traces in Prod.
        """
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(
                500, "Internal Server Error" if not settings.DEBUG else str(exc)
            ),
        )

    # 4. Mount Routes
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(formatting_router, prefix=API_PREFIX)
    app.include_router(catalog_router, prefix=API_PREFIX)

    return app


# Entry point for local debugging (e.g. `python -m homework_diary.adapters.api.main`)
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "homework_diary.adapters.api.main:create_app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        factory=True,
    )
