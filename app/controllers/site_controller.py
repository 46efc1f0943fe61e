# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: the single-page site and its JSON views."""
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from app.core.dependencies import get_content_service, get_session_service
from app.metrics import PAGE_VIEWS
from app.schemas import SessionState, SessionView, SiteContent
from app.services.content_service import ContentService
from app.services.session_service import SessionService
from app.services.session_storage import CookieStorage

router = APIRouter(tags=["Site"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def render_page(
    request: Request,
    content: ContentService,
    storage: CookieStorage,
    session: SessionState,
    login_error: Optional[str] = None,
    login_email: str = "",
    status_code: int = 200,
):
    context = content.page_context()
    context.update(
        session=session,
        login_error=login_error,
        login_email=login_email,
    )
    response = templates.TemplateResponse(request, "index.html", context, status_code=status_code)
    return storage.apply(response)


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    content: ContentService = Depends(get_content_service),
    sessions: SessionService = Depends(get_session_service),
):
    PAGE_VIEWS.labels(page="index").inc()
    storage = CookieStorage(request.cookies)
    session = await sessions.initialize(storage)
    return render_page(request, content, storage, session)


@router.get("/api/v1/content", response_model=SiteContent)
def site_content(content: ContentService = Depends(get_content_service)):
    return content.site_content()


@router.get("/api/v1/session", response_model=SessionView)
async def current_session(
    request: Request,
    sessions: SessionService = Depends(get_session_service),
):
    storage = CookieStorage(request.cookies)
    session = await sessions.initialize(storage)
    response = JSONResponse(content=SessionView(member=session.member, verified=session.verified).model_dump())
    return storage.apply(response)
