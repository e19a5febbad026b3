"""
Header-based identity, for local development and tests only.

Resolves the user from 'Authorization: Bearer <user-id>' or, failing that, from
'X-User-Id'. The value is taken as-is: nothing is signed or verified, so any
caller can act as any user by choosing the header. Real deployments need a
provider that verifies credentials, such as a JWT session-cookie provider
('SessionCookieProvider') that issues signed tokens and checks them on every
request.
"""

from fastapi import FastAPI, HTTPException, Request, status
from loguru import logger

from storefront_toolkit.api.auth.base import AuthProvider


class HeaderAuthProvider(AuthProvider):
    """Trusts the caller-supplied user id. Do not expose it to untrusted clients."""

    def __init__(self, user_header: str = "X-User-Id") -> None:
        self.user_header = user_header

    def get_current_user_id(self, request: Request) -> str:
        authorization = request.headers.get("Authorization", "")
        scheme, _, token = authorization.partition(" ")
        if scheme.lower() == "bearer" and token.strip():
            return token.strip()

        user_id = request.headers.get(self.user_header, "").strip()
        if user_id:
            return user_id

        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Access token required")

    def bind_to_app(self, app: FastAPI) -> None:
        logger.warning(
            f"HeaderAuthProvider trusts 'Authorization: Bearer' and '{self.user_header}' without verification; "
            "use it for development only"
        )
