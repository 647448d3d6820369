"""FastAPI application factory"""

from datetime import datetime, timezone

from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from credit_coach.api.middleware import MetricsMiddleware, RequestIDMiddleware
from credit_coach.api.v1 import advice, evaluate, profiles
from credit_coach.config import settings
from credit_coach.infrastructure.observability.logging import setup_logging

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Credit Coach",
        description="Credit health scoring and improvement recommendations",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {
            "status": "ok",
            "service": settings.service_name,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(evaluate.router, prefix="/v1", tags=["evaluation"])
    app.include_router(profiles.router, prefix="/v1", tags=["profiles"])
    app.include_router(advice.router, prefix="/v1", tags=["advice"])

    return app


app = create_app()
