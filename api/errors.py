"""
api.errors - JSON error bodies for HTTP errors.

One handler covers every werkzeug HTTPException raised inside the
blueprint; main.create_app registers it app-wide too, so routing
errors (404/405) get the same shape.
"""

from flask import jsonify
from werkzeug.exceptions import HTTPException

from api import api_bp

_MESSAGES = {
    400: "bad request",
    404: "not found",
    405: "method not allowed",
    413: "request body too large",
    500: "internal server error",
}


@api_bp.errorhandler(HTTPException)
def json_http_error(e: HTTPException):
    return jsonify({"error": _MESSAGES.get(e.code, e.name.lower())}), e.code
