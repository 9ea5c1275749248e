import logging
from typing import Any, Protocol

import httpx
from pydantic import ValidationError
from pydantic.alias_generators import to_camel

from farmwork.errors import AuthServiceError
from farmwork.models.user import User
from farmwork.schemas.auth import AuthResult, LoginCredentials, RegisterData

logger = logging.getLogger(__name__)

NETWORK_ERROR = "Network error. Please check your connection."


class AuthService(Protocol):
    """Token-issuing auth service. Every call raises ``AuthError`` on failure."""

    async def login(self, credentials: LoginCredentials) -> AuthResult: ...

    async def register(self, data: RegisterData) -> AuthResult: ...

    async def get_current_user(self, token: str) -> User: ...

    async def logout(self, token: str | None) -> None: ...

    async def forgot_password(self, email: str) -> None: ...

    async def reset_password(self, token: str, password: str) -> None: ...

    async def aclose(self) -> None: ...


def _camelize(data: dict[str, Any]) -> dict[str, Any]:
    return {to_camel(key): value for key, value in data.items() if value is not None}


class HttpAuthService:
    """Talks to the FarmWork REST auth endpoints.

    Responses use the ``{"success": bool, "data": ..., "message": str}``
    envelope; anything else is reported as an ``AuthServiceError``.
    """

    def __init__(self, base_url: str, timeout: float = 30.0, client: httpx.AsyncClient | None = None):
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def aclose(self):
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        default_error: str,
        payload: dict | None = None,
        token: str | None = None,
    ) -> Any:
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        try:
            response = await self._client.request(method, path, json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("Auth request %s %s failed: %s", method, path, e)
            raise AuthServiceError(NETWORK_ERROR) from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.is_error or not body.get("success"):
            message = body.get("message") or body.get("error") or default_error
            raise AuthServiceError(message, status_code=response.status_code)
        return body.get("data")

    def _auth_result(self, data: Any, default_error: str) -> AuthResult:
        if not isinstance(data, dict) or not data.get("token"):
            raise AuthServiceError(default_error)
        try:
            return AuthResult(
                user=User.model_validate(data.get("user")),
                token=data["token"],
                refresh_token=data.get("refreshToken"),
            )
        except ValidationError as e:
            raise AuthServiceError(default_error) from e

    async def login(self, credentials: LoginCredentials) -> AuthResult:
        data = await self._request("POST", "/api/auth/login", "Login failed", payload=credentials.model_dump())
        return self._auth_result(data, "Login failed")

    async def register(self, data: RegisterData) -> AuthResult:
        body = await self._request(
            "POST", "/api/auth/register", "Registration failed", payload=_camelize(data.model_dump())
        )
        return self._auth_result(body, "Registration failed")

    async def get_current_user(self, token: str) -> User:
        data = await self._request("GET", "/api/auth/me", "Failed to get user", token=token)
        try:
            return User.model_validate(data)
        except ValidationError as e:
            raise AuthServiceError("Failed to get user") from e

    async def logout(self, token: str | None) -> None:
        await self._request("POST", "/api/auth/logout", "Logout failed", token=token)

    async def forgot_password(self, email: str) -> None:
        await self._request("POST", "/api/auth/forgot-password", "Password reset failed", payload={"email": email})

    async def reset_password(self, token: str, password: str) -> None:
        await self._request(
            "POST",
            "/api/auth/reset-password",
            "Password reset failed",
            payload={"token": token, "password": password},
        )
