# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Member session stub.

The session lives in the client's storage (token + JSON member). The backend is
asked to confirm it when it can be reached; whenever it cannot, the session
falls back to whatever the client already holds or to a member built from the
entered email. Nothing here is a security boundary.
"""
import json
from typing import Optional

from pydantic import ValidationError

from app.core.config import settings
from app.core.logging import get_logger
from app.metrics import LOGIN_ATTEMPTS, SESSION_CHECKS
from app.schemas import Member, SessionState
from app.services.auth_client import AuthClient, AuthUnavailable
from app.services.session_storage import SessionStorage

logger = get_logger("est-website.session")

MISSING_CREDENTIALS_MESSAGE = "Inserisci email e password."
EMAIL_TOO_LONG_MESSAGE = "Indirizzo email troppo lungo."
MAX_EMAIL_LENGTH = 254


class LoginValidationError(Exception):
    def __init__(self, message: str = MISSING_CREDENTIALS_MESSAGE):
        super().__init__(message)
        self.message = message


def member_from_email(email: str) -> Member:
    local_part = email.split("@", 1)[0]
    return Member(email=email, name=local_part or email)


class SessionService:
    def __init__(self, auth_client: AuthClient):
        self._auth = auth_client

    # ── storage helpers ──
    def _read_member(self, storage: SessionStorage) -> Optional[Member]:
        raw = storage.get(settings.MEMBER_KEY)
        if not raw:
            return None
        try:
            return Member.model_validate(json.loads(raw))
        except (ValueError, ValidationError):
            logger.warning("Discarding malformed cached member")
            storage.remove(settings.MEMBER_KEY)
            return None

    def _write_member(self, storage: SessionStorage, member: Member) -> None:
        storage.set(settings.MEMBER_KEY, member.model_dump_json())

    # ── operations ──
    async def initialize(self, storage: SessionStorage) -> SessionState:
        """Restore the session on page load, confirming the token when possible."""
        token = storage.get(settings.TOKEN_KEY)
        cached = self._read_member(storage)

        if not token:
            SESSION_CHECKS.labels(outcome="cached" if cached else "anonymous").inc()
            return SessionState(member=cached)

        try:
            member = await self._auth.me(token)
        except AuthUnavailable as exc:
            logger.warning("Token verification failed: %s", exc)
            if cached is not None:
                SESSION_CHECKS.labels(outcome="cached").inc()
                return SessionState(member=cached, token=token)
            storage.remove(settings.TOKEN_KEY)
            SESSION_CHECKS.labels(outcome="cleared").inc()
            return SessionState()

        self._write_member(storage, member)
        SESSION_CHECKS.labels(outcome="verified").inc()
        return SessionState(member=member, token=token, verified=True)

    async def login(self, storage: SessionStorage, email: str, password: str) -> SessionState:
        email = (email or "").strip()
        if not email or not password:
            LOGIN_ATTEMPTS.labels(outcome="invalid").inc()
            raise LoginValidationError()
        if len(email) > MAX_EMAIL_LENGTH:
            LOGIN_ATTEMPTS.labels(outcome="invalid").inc()
            raise LoginValidationError(EMAIL_TOO_LONG_MESSAGE)

        try:
            result = await self._auth.login(email, password)
        except AuthUnavailable as exc:
            logger.warning("Remote login unavailable, using local member for %s: %s", email, exc)
            member = member_from_email(email)
            storage.remove(settings.TOKEN_KEY)
            self._write_member(storage, member)
            LOGIN_ATTEMPTS.labels(outcome="fallback").inc()
            return SessionState(member=member)

        storage.set(settings.TOKEN_KEY, result.token)
        self._write_member(storage, result.member)
        LOGIN_ATTEMPTS.labels(outcome="remote").inc()
        logger.info("Member %s logged in", result.member.email)
        return SessionState(member=result.member, token=result.token, verified=True)

    def logout(self, storage: SessionStorage) -> SessionState:
        storage.remove(settings.TOKEN_KEY)
        storage.remove(settings.MEMBER_KEY)
        return SessionState()
