"""Plain-text error responses for unknown paths and disallowed methods."""
from __future__ import annotations

import logging

from flask import Flask, Response, abort, request
from werkzeug.exceptions import MethodNotAllowed, NotFound

from .greetings import ALLOWED_METHODS, IMPLICIT_METHODS, plain_text

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    app.before_request(reject_folded_slashes)
    app.before_request(reject_head)
    app.register_error_handler(NotFound, not_found)
    app.register_error_handler(MethodNotAllowed, method_not_allowed)


def reject_folded_slashes() -> None:
    """Treat a raw target such as ``//hello`` as a miss.

    Werkzeug's server reads the first segment after ``//`` as a netloc and
    folds it back into PATH_INFO, so the check runs on the raw request target.
    """
    raw_uri = request.environ.get("RAW_URI") or request.environ.get("REQUEST_URI") or ""
    if raw_uri.startswith("//"):
        abort(404)


def reject_head() -> None:
    """Refuse HEAD on known routes; Werkzeug would otherwise answer it as GET."""
    if request.method == "HEAD" and request.url_rule is not None:
        abort(405, valid_methods=list(ALLOWED_METHODS))


def not_found(error: NotFound) -> Response:
    logger.debug(f"No route for {request.method} {request.path}")
    return plain_text("Not Found", status=404)


def method_not_allowed(error: MethodNotAllowed) -> Response:
    allowed = [m for m in (error.valid_methods or ALLOWED_METHODS) if m not in IMPLICIT_METHODS]
    logger.debug(f"Method {request.method} not allowed on {request.path}")
    response = plain_text("Method Not Allowed", status=405)
    response.headers["Allow"] = ", ".join(allowed or ALLOWED_METHODS)
    return response
