from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Optional

import jwt

from ..common.datetime_utils import utc_now
from ..core.constants import TOKEN_ALGORITHM, TOKEN_TTL_HOURS
from ..core.exceptions import AuthorizationError
from ..users.model import User


class TokenService:
    """Issues and verifies the signed bearer tokens used by the API."""

    def __init__(self, secret: str, *, ttl_hours: int = TOKEN_TTL_HOURS):
        if not secret:
            raise ValueError("JWT secret must not be empty")
        self._secret = secret
        self._ttl = timedelta(hours=int(ttl_hours))

    def issue(self, user: User, *, now: Optional[datetime] = None) -> str:
        issued_at = now or utc_now()
        claims = {
            "userId": user.id,
            "role": user.role,
            "iat": issued_at,
            "exp": issued_at + self._ttl,
        }
        return jwt.encode(claims, self._secret, algorithm=TOKEN_ALGORITHM)

    def decode(self, token: str) -> dict[str, Any]:
        """Return the claims of a valid token.

        Expired, tampered and malformed tokens all raise ``AuthorizationError``
        (the API answers 403 for them, 401 only when no token is sent).
        """

        try:
            claims = jwt.decode(token, self._secret, algorithms=[TOKEN_ALGORITHM])
        except jwt.ExpiredSignatureError as exc:
            raise AuthorizationError("Token expired") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthorizationError("Invalid token") from exc

        if not isinstance(claims.get("userId"), int):
            raise AuthorizationError("Invalid token")
        return claims
