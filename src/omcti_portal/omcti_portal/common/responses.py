from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Mapping

from flask import jsonify, request

from ..core.exceptions import (
    ApiConnectionError,
    ApiResponseError,
    AuthenticationError,
    AuthorizationError,
    ValidationError,
)

log = logging.getLogger(__name__)


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_ok(**payload):
    return jsonify({"success": True, **payload})


def json_body(*, allow_form: bool = False) -> Mapping[str, Any]:
    """Request body as a mapping; anything but a JSON object reads as empty."""
    data = request.get_json(silent=True)
    if isinstance(data, Mapping):
        return data
    return request.form if allow_form else {}


def json_endpoint(view):
    """Map domain and API errors raised by a view to JSON error replies."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return json_error(str(e), 400)
        except AuthenticationError as e:
            return json_error(str(e), 401)
        except AuthorizationError as e:
            return json_error(str(e), 403)
        except ApiResponseError as e:
            return json_error(str(e), 502)
        except ApiConnectionError as e:
            return json_error(f"{e}. Please check your connection and try again.", 502)
        except Exception:
            log.exception("unhandled error in %s", view.__name__)
            return json_error("Internal server error", 500)

    return wrapper
