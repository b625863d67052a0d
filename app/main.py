"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized error-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration

No business logic belongs here.
"""

import uvicorn
from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from app.core.config import settings
from app.interfaces.health import router as health_router
from app.interfaces.secrets.router import router as secrets_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(secrets_router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8080,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
