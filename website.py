"""
εστ website
===========
Single-page promotional site of the engineering students association of
Trieste: hero, sections, events, contact info and the demo member area.
Member sessions are kept in browser cookies and confirmed against the REST
API when it answers.

Port: 3000
"""
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.controllers import session_controller, site_controller, system_controller
from app.core.config import settings
from app.core.dependencies import close_http_client, init_http_client
from app.core.logging import get_logger
from app.middleware import MetricsMiddleware, RequestIDMiddleware
from app.schemas import ErrorResponse

logger = get_logger(settings.SITE_SERVICE_NAME)

STATIC_DIR = Path(__file__).resolve().parent / "app" / "static"


@asynccontextmanager
async def lifespan(application: FastAPI):
    init_http_client()
    logger.info("Website started, auth API at %s", settings.API_URL)
    yield
    await close_http_client()
    logger.info("Shutting down — HTTP client closed")


app = FastAPI(
    title="εστ engineeringstudentstrieste",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
)
app.state.service_name = settings.SITE_SERVICE_NAME

app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware, logger_name=settings.SITE_SERVICE_NAME)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception")
    body = ErrorResponse(error="internal_server_error", detail=str(exc))
    return JSONResponse(status_code=500, content=body.model_dump())


app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
app.include_router(system_controller.router)
app.include_router(site_controller.router)
app.include_router(session_controller.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SITE_PORT)
