# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Dependency injection — HTTP client, content and session service singletons."""
import httpx

from app.core.config import settings
from app.repositories.content_repository import ContentRepository
from app.services.auth_client import AuthClient
from app.services.content_service import ContentService
from app.services.session_service import SessionService

_http_client: httpx.AsyncClient | None = None
_session_service: SessionService | None = None
_content_service = ContentService(ContentRepository())


def init_http_client():
    global _http_client, _session_service
    _http_client = httpx.AsyncClient(timeout=settings.AUTH_TIMEOUT)
    _session_service = SessionService(AuthClient(_http_client))


async def close_http_client():
    global _http_client, _session_service
    if _http_client:
        await _http_client.aclose()
    _http_client = None
    _session_service = None


def get_content_service() -> ContentService:
    return _content_service


def get_session_service() -> SessionService:
    if _session_service is None:
        init_http_client()
    return _session_service
