"""
Task Manager API - Auth Gate

Bearer-token check applied to protected routers. The gate is stateless: it
verifies the token signature and expiry only, without consulting the user store.
"""

from typing import Annotated, Optional

from fastapi import Depends, Request, status
from fastapi.security import APIKeyHeader

from taskapi.auth.models import SessionClaims
from taskapi.auth.service import decode_token
from taskapi.errors import AuthError

NO_TOKEN_MESSAGE = "Access denied. No token provided."
BAD_FORMAT_MESSAGE = "Access denied. Invalid token format."
INVALID_TOKEN_MESSAGE = "Invalid token."

# Reads the raw header; auto_error=False so the gate can report its own errors.
# Declared as a security scheme so Swagger UI offers an "Authorize" field.
authorization_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    description="`Bearer <token>` as returned by /api/auth/login",
)


def extract_token(header_value: Optional[str]) -> str:
    """Pull the token out of a `<scheme> <token>` header value."""
    if header_value is None or not header_value.strip():
        raise AuthError(status.HTTP_401_UNAUTHORIZED, NO_TOKEN_MESSAGE)

    parts = header_value.split()
    if len(parts) < 2:
        raise AuthError(status.HTTP_400_BAD_REQUEST, BAD_FORMAT_MESSAGE)
    return parts[1]


async def require_token(
    request: Request,
    header_value: Annotated[Optional[str], Depends(authorization_header)],
) -> SessionClaims:
    token = extract_token(header_value)

    claims = decode_token(token)
    if claims is None:
        raise AuthError(status.HTTP_400_BAD_REQUEST, INVALID_TOKEN_MESSAGE)

    request.state.user = claims
    return claims


# Type alias for handlers that want the caller's claims
CurrentClaims = Annotated[SessionClaims, Depends(require_token)]
