"""
Authentication Dependency for FastAPI.

- Extracts the Bearer token from the Authorization header
- Reads the user_id claim from the JWT payload
- Raises HTTPException 401 if the header, token or claim is missing

The signature is NOT verified here: tokens are validated by the gateway in
front of this service, which only needs the caller's identity.
"""

from dataclasses import dataclass
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer


@dataclass
class AuthUser:
    user_id: str

    def __post_init__(self):
        if not self.user_id:
            raise ValueError("AuthUser must have a user_id defined.")


security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def extract_user_id(token: str) -> str:
    """
    Read user_id from an unverified JWT.

    Raises:
        HTTPException 401 on malformed tokens or a missing claim
    """
    if not token or not token.strip():
        raise _unauthorized("Missing or invalid Authorization header")

    if len(token.strip().split(".")) != 3:
        raise _unauthorized("Invalid JWT format")

    try:
        claims = jwt.decode(token.strip(), options={"verify_signature": False})
    except jwt.InvalidTokenError:
        raise _unauthorized("Failed to decode JWT payload")

    user_id = claims.get("user_id")
    if user_id is None or not str(user_id).strip():
        raise _unauthorized("Missing user_id claim in JWT")

    return str(user_id)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> AuthUser:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise _unauthorized("Missing or invalid Authorization header")

    return AuthUser(user_id=extract_user_id(credentials.credentials))
