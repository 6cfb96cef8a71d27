"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Surfaces:
- POST /authenticate
- GET/POST /conversations, GET/POST /conversations/{id}
- websocket /cable
- GET /metrics, GET /health
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware

from rtchat.config.logging_config import correlation_id_var, setup_logging
from rtchat.config.settings import Config, get_config
from rtchat.observability.metrics import observe_request_latency
from rtchat.presentation.api import (
    auth_router,
    cable_router,
    conversations_router,
    metrics_router,
)
from rtchat.presentation.errors import register_exception_handlers
from rtchat.presentation.responses import JsonApiResponse
from rtchat.setup.ioc.container import create_container

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", "NO Correlation ID")

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


class RequestLatencyMiddleware(BaseHTTPMiddleware):
    """Records request latency per route template."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        route = request.scope.get("route")
        observe_request_latency(
            request.method,
            getattr(route, "path", "unmatched"),
            response.status_code,
            time.perf_counter() - started,
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: nothing to do, the container resolves lazily.
    Shutdown: close the DI container, which cancels pending background tasks.
    """
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await app.state.dishka_container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def create_fastapi_app(config: Optional[type[Config]] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        config: Config class to build from (defaults to APP_ENV's)

    Returns:
        FastAPI application instance
    """
    config = config or get_config()
    setup_logging(config.LOG_LEVEL, config.LOG_PATH, config.LOG_FORMAT)

    app = FastAPI(
        title="Realtime Chat API",
        description="JSON:API conversations with a realtime websocket channel",
        version="1.0.0",
        lifespan=lifespan,
        default_response_class=JsonApiResponse,
    )
    app.state.config = config

    # Dishka adds middleware, so it must be set up before the app starts
    setup_dishka(create_container(config), app)

    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(RequestLatencyMiddleware)

    register_exception_handlers(app)

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(auth_router)  # POST /authenticate
    app.include_router(conversations_router)
    app.include_router(cable_router)  # websocket /cable
    app.include_router(metrics_router)  # GET /metrics

    return app


# Create the app instance
app = create_fastapi_app()
