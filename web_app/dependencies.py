"""Request dependencies enforcing the UI and API credential schemes."""

from typing import Optional

from fastapi import Request, Security
from fastapi.security import APIKeyHeader

from lib.auth import API_KEY_HEADER, verify_api_key, verify_basic_auth
from lib.errors import AuthError


api_key_header = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)


async def require_basic_auth(request: Request) -> None:
    """Gate UI routes behind Basic Auth; failure triggers a browser challenge."""
    config = request.app.state.config
    
    if not verify_basic_auth(
        request.headers.get("authorization"),
        config.basic_auth_user,
        config.basic_auth_pass.get_secret_value(),
    ):
        raise AuthError("Authentication required", challenge=True)


async def require_api_key(
    request: Request,
    api_key: Optional[str] = Security(api_key_header),
) -> None:
    """Gate API routes behind the X-API-Key header."""
    config = request.app.state.config
    
    if not verify_api_key(api_key, config.api_secret.get_secret_value()):
        raise AuthError("Invalid API key", challenge=False)
