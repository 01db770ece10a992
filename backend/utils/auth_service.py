# utils/auth_service.py
import httpx
import logging
from typing import Optional

from config import settings

logger = logging.getLogger(__name__)

FUNCTION_PATH = "/functions/v1/auth-helpers"


class AuthServiceError(Exception):
    """The auth-helpers function could not be reached or answered garbage."""


class AuthServiceClient:
    """HTTP client of the auth-helpers function.

    Every call is one JSON POST `{action, ...fields}` authorized with the
    public (anon) key. The function answers `{success, user?}` or `{error}`;
    both shapes are returned as-is, only transport problems raise.
    """

    def __init__(self, api_url: Optional[str] = None, anon_key: Optional[str] = None,
                 http: Optional[httpx.Client] = None):
        self.api_url = settings.ELEGANTE_API_URL if api_url is None else api_url
        self.anon_key = settings.ELEGANTE_ANON_KEY if anon_key is None else anon_key
        # Only a client created here is closed by close()
        self._owns_http = http is None
        self.http = http or httpx.Client()

    @property
    def endpoint(self) -> str:
        return f"{self.api_url.rstrip('/')}{FUNCTION_PATH}"

    def _call(self, action: str, **fields) -> dict:
        headers = {
            "Authorization": f"Bearer {self.anon_key}",
            "Content-Type": "application/json",
        }
        try:
            response = self.http.post(self.endpoint, json={"action": action, **fields}, headers=headers)
            result = response.json()
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            logger.error(f"auth-helpers '{action}' call failed: {e}")
            raise AuthServiceError(str(e)) from e

        if not isinstance(result, dict):
            raise AuthServiceError(f"Unexpected response for '{action}': {result!r}")
        return result

    def login(self, username: str, password: str) -> dict:
        return self._call("login", username=username, password=password)

    def create_user(self, username: str, password: str, role: str) -> dict:
        return self._call("create_user", username=username, password=password, role=role)

    def create_default_admin(self) -> dict:
        return self._call("create_default_admin")

    def close(self):
        if self._owns_http:
            self.http.close()


auth_service = AuthServiceClient()


def get_auth_service() -> AuthServiceClient:
    return auth_service
