from __future__ import annotations

import logging
from functools import wraps
from typing import Any

from flask import jsonify, request

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def error_response(message: str, status: int, **extra: Any):
    body = {"message": message}
    body.update(extra)
    return jsonify(body), status


def json_endpoint(view):
    """Map domain exceptions raised by one route to a status code and ``{message}`` body."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            if e.fields:
                errors = [{"field": k, "message": v} for k, v in e.fields.items()]
                return error_response(str(e), 400, errors=errors)
            return error_response(str(e), 400)
        except AuthenticationError as e:
            return error_response(str(e), 401)
        except AuthorizationError as e:
            return error_response(str(e), 403)
        except NotFoundError as e:
            return error_response(str(e), 404)
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.path)
            return error_response("Internal server error", 500)

    return wrapper


def json_body() -> Any:
    data = request.get_json(silent=True)
    if data is None:
        raise ValidationError("Request body must be valid JSON")
    return data


def query_int(name: str, default: int) -> int:
    raw = request.args.get(name)
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return value if value > 0 else default
