from __future__ import annotations

import logging
from functools import wraps

from flask import g, request

from ..common.http import error_response
from ..core.exceptions import AuthorizationError

logger = logging.getLogger(__name__)


def _bearer_token() -> str:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


def token_required(container):
    """Build the decorator that guards every authenticated route.

    The user row is re-read on each request so role changes apply at once and
    deleted users are locked out even with an unexpired token.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = _bearer_token()
            if not token:
                return error_response("Access token required", 401)

            try:
                user = container.auth_service.resolve_token(token)
            except AuthorizationError as e:
                return error_response(str(e), 403)
            except Exception:
                logger.exception("Token lookup failed for %s %s", request.method, request.path)
                return error_response("Internal server error", 500)
            if user is None:
                return error_response("Invalid token", 403)

            g.current_user = user
            return view(*args, **kwargs)

        return wrapper

    return decorator
