"""
εστ REST API
============
Backend process of the engineeringstudentstrieste site. Opens the MongoDB
connection and serves the informational root route plus ops endpoints.
Authentication routes are not implemented here.

Port: 5000
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.controllers import api_controller, system_controller
from app.core import database
from app.core.config import settings
from app.core.logging import get_logger
from app.metrics import DATABASE_UP
from app.middleware import MetricsMiddleware, RequestIDMiddleware
from app.schemas import ErrorResponse

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──────────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(application: FastAPI):
    try:
        database.verify_connection()
        DATABASE_UP.set(1)
        logger.info("Connected to MongoDB database=%s", database.get_database().name)
    except Exception as exc:
        DATABASE_UP.set(0)
        logger.warning("MongoDB not reachable yet: %s", exc)
    yield
    database.close()
    logger.info("Shutting down — MongoDB client closed")


# ── FastAPI App ───────────────────────────────────────────────────────────
app = FastAPI(
    title="εστ REST API",
    description="API REST Engineering Students Trieste",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)
app.state.service_name = settings.SERVICE_NAME

app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware, logger_name=settings.SERVICE_NAME)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception")
    body = ErrorResponse(error="internal_server_error", detail=str(exc))
    return JSONResponse(status_code=500, content=body.model_dump())


app.include_router(system_controller.router)
app.include_router(api_controller.router)


if __name__ == "__main__":
    import uvicorn
    logger.info("Server listening on http://localhost:%s", settings.PORT)
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
