# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Persistent client storage for the member session: in-memory or browser cookies."""
from typing import Dict, List, Optional, Tuple
from urllib.parse import quote, unquote

from starlette.responses import Response

from app.core.config import settings


class SessionStorage:
    """Key/value store the session survives in between page loads."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError


class MemoryStorage(SessionStorage):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


class CookieStorage(SessionStorage):
    """
    Reads the request cookies and queues writes until apply() copies them
    onto the outgoing response. Values are percent-encoded on the wire since
    Set-Cookie headers only carry latin-1.
    """

    def __init__(self, cookies: Dict[str, str]):
        self._values: Dict[str, Optional[str]] = {k: unquote(v) for k, v in cookies.items()}
        self._pending: List[Tuple[str, Optional[str]]] = []

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key) or None

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
        self._pending.append((key, value))

    def remove(self, key: str) -> None:
        self._values.pop(key, None)
        self._pending.append((key, None))

    def apply(self, response: Response) -> Response:
        for key, value in self._pending:
            if value is None:
                response.delete_cookie(key, path="/")
            else:
                response.set_cookie(
                    key,
                    quote(value, safe=""),
                    max_age=settings.COOKIE_MAX_AGE,
                    path="/",
                    secure=settings.COOKIE_SECURE,
                    httponly=True,
                    samesite="lax",
                )
        self._pending.clear()
        return response
