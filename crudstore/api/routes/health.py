"""
Health and metrics API routes.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Response
from prometheus_client import CONTENT_TYPE_LATEST

from crudstore.dependencies.services import ServiceContainer, get_services
from crudstore.monitoring import get_metrics

router = APIRouter(tags=["health"])
metrics_router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(services: ServiceContainer = Depends(get_services)):
    """Liveness check with the current server time and collection sizes."""
    return {
        "status": "ok",
        "time": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
        "resources": {
            "items": services.items.count(),
            "clients": services.clients.count(),
        },
    }


@metrics_router.get("/metrics")
def metrics():
    """Prometheus metrics endpoint."""
    return Response(content=get_metrics(), media_type=CONTENT_TYPE_LATEST)
