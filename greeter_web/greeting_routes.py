"""Greeting route, kept apart from the hello routes on its own blueprint."""
from __future__ import annotations

from flask import Blueprint, Response

from .greetings import GREETINGS, plain_text

greeting_bp = Blueprint("greeting", __name__)


@greeting_bp.get("/greeting", provide_automatic_options=False)
def greeting() -> Response:
    return plain_text(GREETINGS["/greeting"])
