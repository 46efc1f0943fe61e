# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: REST API root and database readiness."""
from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from app.core import database
from app.metrics import DATABASE_UP

router = APIRouter(tags=["API"])

ROOT_MESSAGE = "API REST Engineering Students Trieste"


@router.get("/", response_class=PlainTextResponse)
def root():
    return ROOT_MESSAGE


@router.get("/health/ready")
def readiness_check():
    """Deep health check — confirms MongoDB answers a ping."""
    try:
        database.verify_connection()
    except Exception as exc:
        DATABASE_UP.set(0)
        raise HTTPException(status_code=503, detail=f"Database unavailable: {exc}")
    DATABASE_UP.set(1)
    return {"status": "ok", "database": "connected"}
