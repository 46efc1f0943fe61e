# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Controller: member login / logout form posts."""
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse

from app.controllers.site_controller import render_page
from app.core.dependencies import get_content_service, get_session_service
from app.services.content_service import ContentService
from app.services.session_service import LoginValidationError, SessionService
from app.services.session_storage import CookieStorage

router = APIRouter(tags=["Session"])

MEMBER_AREA_URL = "/#area-soci"


@router.post("/login")
async def login(
    request: Request,
    email: str = Form(default=""),
    password: str = Form(default=""),
    content: ContentService = Depends(get_content_service),
    sessions: SessionService = Depends(get_session_service),
):
    storage = CookieStorage(request.cookies)
    try:
        await sessions.login(storage, email, password)
    except LoginValidationError as exc:
        session = await sessions.initialize(storage)
        return render_page(
            request,
            content,
            storage,
            session,
            login_error=exc.message,
            login_email=email,
            status_code=400,
        )
    return storage.apply(RedirectResponse(MEMBER_AREA_URL, status_code=303))


@router.post("/logout")
def logout(
    request: Request,
    sessions: SessionService = Depends(get_session_service),
):
    storage = CookieStorage(request.cookies)
    sessions.logout(storage)
    return storage.apply(RedirectResponse(MEMBER_AREA_URL, status_code=303))
