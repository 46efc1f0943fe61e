# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
HTTP client for the backend authentication endpoints.
Every failure surfaces as AuthUnavailable so callers can fall back locally.
"""

import httpx
from pydantic import ValidationError

from app.core.config import settings
from app.core.logging import get_logger
from app.schemas import LoginRequest, LoginResponse, Member

logger = get_logger("est-website.auth")


class AuthUnavailable(Exception):
    """The backend could not confirm the request (network error, non-2xx, bad body)."""


class AuthClient:
    def __init__(self, http_client: httpx.AsyncClient, base_url: str = settings.API_URL):
        self._client = http_client
        self._base_url = base_url.rstrip("/")

    async def login(self, email: str, password: str) -> LoginResponse:
        body = LoginRequest(email=email, password=password).model_dump()
        resp = await self._request("POST", "/api/auth/login", json=body)
        try:
            return LoginResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise AuthUnavailable(f"Malformed login response: {exc}") from exc

    async def me(self, token: str) -> Member:
        resp = await self._request(
            "GET", "/api/auth/me", headers={"Authorization": f"Bearer {token}"}
        )
        try:
            data = resp.json()
            if isinstance(data, dict) and "member" in data:
                data = data["member"]
            return Member.model_validate(data)
        except (ValueError, ValidationError) as exc:
            raise AuthUnavailable(f"Malformed member response: {exc}") from exc

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        url = f"{self._base_url}{path}"
        try:
            resp = await self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            raise AuthUnavailable(f"{method} {path} unreachable: {exc}") from exc
        if not resp.is_success:
            raise AuthUnavailable(f"{method} {path} returned {resp.status_code}")
        return resp
