# utils/session.py
import logging
from typing import Optional

from fastapi import Depends, Request, Response
from pydantic import ValidationError

from config import settings
from schemas.user import SessionUser
from utils.auth_service import AuthServiceClient, AuthServiceError, get_auth_service
from utils.tokenJWT import encode_session_record, decode_session_record

logger = logging.getLogger(__name__)


class CookieStorage:
    """Durable client-side storage: one signed cookie per key."""

    def __init__(self, request: Request, response: Response):
        self.request = request
        self.response = response

    def get(self, key: str) -> Optional[dict]:
        token = self.request.cookies.get(key)
        if not token:
            return None
        return decode_session_record(token)

    def set(self, key: str, value: dict):
        self.response.set_cookie(key, encode_session_record(value), httponly=True, samesite="lax")

    def remove(self, key: str):
        self.response.delete_cookie(key)


class SessionStore:
    """Current user of one client.

    Hydrated once from durable storage before the page is handled; the
    stored role is trusted as-is. `login` goes through the auth-helpers
    function, `logout` always clears both copies.
    """

    def __init__(self, auth_service: AuthServiceClient, storage, key: str = None):
        self.auth_service = auth_service
        self.storage = storage
        self.key = key or settings.SESSION_COOKIE
        self.user: Optional[SessionUser] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def hydrate(self) -> Optional[SessionUser]:
        record = self.storage.get(self.key)
        if record:
            try:
                self.user = SessionUser.model_validate(record)
            except ValidationError:
                logger.warning("Ignoring malformed session record")
        return self.user

    def login(self, username: str, password: str) -> bool:
        try:
            result = self.auth_service.login(username, password)
        except AuthServiceError:
            return False

        if result.get("success") and result.get("user"):
            try:
                user = SessionUser.model_validate(result["user"])
            except ValidationError:
                logger.error(f"Login response carried an invalid user: {result['user']!r}")
                return False
            self.user = user
            self.storage.set(self.key, user.model_dump(mode="json"))
            return True

        logger.warning(f"Login failed for '{username}': {result.get('error')}")
        return False

    def logout(self):
        self.user = None
        self.storage.remove(self.key)


def get_session(
    request: Request,
    response: Response,
    auth_service: AuthServiceClient = Depends(get_auth_service),
) -> SessionStore:
    store = SessionStore(auth_service, CookieStorage(request, response))
    store.hydrate()
    return store
