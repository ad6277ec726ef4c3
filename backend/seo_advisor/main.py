"""FastAPI application for the post SEO advisor.

Hosts the draft analysis endpoints under /api/v1/seo and a /health probe.
Every response carries an X-Request-ID header; errors are returned as
{"error": str, "code": str, "request_id": str}.
"""

import time
import uuid
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from seo_advisor.api.v1 import router as api_v1_router
from seo_advisor.core.config import Settings, get_settings
from seo_advisor.core.logging import get_logger, setup_logging
from seo_advisor.services.seo_analysis import get_seo_analysis_service

setup_logging()
logger = get_logger(__name__)


def _error_response(request: Request, status_code: int, error: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "code": code,
            "request_id": getattr(request.state, "request_id", "unknown"),
        },
    )


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an ID and log its outcome and duration."""

    async def dispatch(self, request: Request, call_next: Any) -> Any:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.monotonic()

        logger.debug(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
            },
        )

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        log_extra = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round((time.monotonic() - start_time) * 1000, 2),
        }
        if response.status_code >= 500:
            logger.error("Request failed", extra=log_extra)
        elif response.status_code >= 400:
            logger.warning("Request error", extra=log_extra)
        else:
            logger.info("Request completed", extra=log_extra)

        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> Any:
    """Build the analysis service at startup.

    A bad SEO_LOCALE fails the startup instead of the first request.
    """
    settings = get_settings()
    service = get_seo_analysis_service()
    logger.info(
        "SEO advisor started",
        extra={
            "version": settings.app_version,
            "environment": settings.environment,
            "locale": service.locale.code,
            "max_batch_size": service.max_batch_size,
        },
    )

    yield

    logger.info("SEO advisor stopped")


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed request bodies as VALIDATION_ERROR."""
        error_msg = "; ".join(
            f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in exc.errors()
        )
        logger.warning(
            "Validation error",
            extra={
                "request_id": getattr(request.state, "request_id", "unknown"),
                "errors": error_msg,
            },
        )
        return _error_response(
            request, status.HTTP_422_UNPROCESSABLE_ENTITY, error_msg, "VALIDATION_ERROR"
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Hide unexpected failures behind INTERNAL_ERROR."""
        logger.error(
            "Unhandled exception",
            extra={
                "request_id": getattr(request.state, "request_id", "unknown"),
                "error_type": type(exc).__name__,
                "error_message": str(exc),
            },
            exc_info=True,
        )
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An internal error occurred. Please try again later.",
            "INTERNAL_ERROR",
        )


def _cors_origins(settings: Settings) -> list[str]:
    # The editor frontend is the only caller once FRONTEND_URL is set
    return [settings.frontend_url] if settings.frontend_url else ["*"]


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(settings),
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    _register_exception_handlers(app)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Liveness probe."""
        return {"status": "ok"}

    app.include_router(api_v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "seo_advisor.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
