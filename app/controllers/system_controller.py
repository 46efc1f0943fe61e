# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""System endpoints shared by the API and the website: liveness and metrics."""
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from app.core.config import settings

router = APIRouter(tags=["System"])

_STARTED_AT = time.monotonic()


@router.get("/health")
def health_check(request: Request):
    """Liveness only; the API's /health/ready covers MongoDB."""
    return {
        "status": "ok",
        "service": request.app.state.service_name,
        "version": settings.SERVICE_VERSION,
        "uptime_seconds": round(time.monotonic() - _STARTED_AT, 1),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/metrics")
def prometheus_metrics():
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
