import json

import httpx
import pytest

from farmwork.errors import AuthServiceError
from farmwork.schemas.auth import LoginCredentials, RegisterData
from farmwork.services.auth_client import NETWORK_ERROR, HttpAuthService

USER_PAYLOAD = {
    "id": "user-1",
    "email": "wanjiku@example.com",
    "firstName": "Wanjiku",
    "lastName": "Kamau",
    "userType": "worker",
    "isVerified": True,
}


def _service(handler) -> HttpAuthService:
    client = httpx.AsyncClient(base_url="http://auth.test", transport=httpx.MockTransport(handler))
    return HttpAuthService("http://auth.test", client=client)


class TestHttpAuthService:
    @pytest.mark.asyncio
    async def test_login_parses_envelope(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(
                200,
                json={"success": True, "data": {"user": USER_PAYLOAD, "token": "jwt", "refreshToken": "r"}},
            )

        service = _service(handler)
        result = await service.login(LoginCredentials(email="wanjiku@example.com", password="Harvest2025"))

        assert result.token == "jwt"
        assert result.refresh_token == "r"
        assert result.user.first_name == "Wanjiku"
        assert result.user.is_verified is True
        assert requests[0].url.path == "/api/auth/login"
        await service.aclose()

    @pytest.mark.asyncio
    async def test_error_message_from_server(self):
        def handler(request):
            return httpx.Response(401, json={"success": False, "message": "Invalid credentials"})

        service = _service(handler)
        with pytest.raises(AuthServiceError) as exc_info:
            await service.login(LoginCredentials(email="a@b.co", password="x"))
        assert str(exc_info.value) == "Invalid credentials"
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_non_json_error_uses_default(self):
        def handler(request):
            return httpx.Response(500, text="Internal Server Error")

        service = _service(handler)
        with pytest.raises(AuthServiceError, match="Failed to get user"):
            await service.get_current_user("jwt")

    @pytest.mark.asyncio
    async def test_network_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        service = _service(handler)
        with pytest.raises(AuthServiceError, match=NETWORK_ERROR):
            await service.forgot_password("a@b.co")

    @pytest.mark.asyncio
    async def test_bearer_token_and_camel_case_payload(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers.get("Authorization")
            seen["body"] = json.loads(request.content) if request.content else None
            if request.url.path == "/api/auth/me":
                return httpx.Response(200, json={"success": True, "data": USER_PAYLOAD})
            return httpx.Response(
                201, json={"success": True, "data": {"user": USER_PAYLOAD, "token": "jwt"}}
            )

        service = _service(handler)
        user = await service.get_current_user("jwt")
        assert user.email == "wanjiku@example.com"
        assert seen["auth"] == "Bearer jwt"

        await service.register(RegisterData(first_name="Wanjiku", user_type="worker", email="w@example.com"))
        assert seen["body"]["firstName"] == "Wanjiku"
        assert seen["body"]["userType"] == "worker"
        assert "bio" not in seen["body"]

    @pytest.mark.asyncio
    async def test_missing_token_is_an_error(self):
        def handler(request):
            return httpx.Response(200, json={"success": True, "data": {"user": USER_PAYLOAD}})

        service = _service(handler)
        with pytest.raises(AuthServiceError, match="Login failed"):
            await service.login(LoginCredentials(email="a@b.co", password="x"))
