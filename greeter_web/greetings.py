"""Constant greeting bodies and the path table they are served on."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from flask import Response

HELLO_WORLD = "Hello, world!"
NEW_ENDPOINT = "This is a new endpoint."

GREETINGS: Mapping[str, str] = MappingProxyType(
    {
        "/hello": HELLO_WORLD,
        "/newEndpoint": NEW_ENDPOINT,
        "/greeting": HELLO_WORLD,
    }
)

# Methods Werkzeug adds to a GET rule on its own; never advertised in Allow.
IMPLICIT_METHODS = frozenset({"HEAD", "OPTIONS"})
ALLOWED_METHODS = ("GET",)


def plain_text(body: str, status: int = 200) -> Response:
    """Build a ``text/plain; charset=utf-8`` response with an exact body."""
    return Response(body, status=status, mimetype="text/plain")
