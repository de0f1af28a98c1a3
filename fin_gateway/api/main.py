"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from fin_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from fin_gateway.api.v1 import transactions, health_score
from fin_gateway.infrastructure.observability.logging import setup_logging
from fin_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Fin Gateway",
        description="Free-text transaction interpretation and financial health scoring",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(transactions.router, prefix="/v1", tags=["transactions"])
    app.include_router(health_score.router, prefix="/v1", tags=["health-score"])

    return app


app = create_app()
