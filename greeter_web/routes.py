"""Hello routes: ``/hello`` and ``/newEndpoint``."""
from __future__ import annotations

from flask import Blueprint, Response

from .greetings import GREETINGS, plain_text

hello_bp = Blueprint("hello", __name__)


@hello_bp.get("/hello", provide_automatic_options=False)
def hello() -> Response:
    return plain_text(GREETINGS["/hello"])


@hello_bp.get("/newEndpoint", provide_automatic_options=False)
def new_endpoint() -> Response:
    """Second greeting on the hello controller."""
    return plain_text(GREETINGS["/newEndpoint"])
