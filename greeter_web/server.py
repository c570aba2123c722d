"""Host the application on a threaded Werkzeug WSGI server."""
from __future__ import annotations

import logging
import signal
import socket

from flask import Flask
from werkzeug.serving import BaseWSGIServer, get_sockaddr, make_server, select_address_family

logger = logging.getLogger(__name__)

LISTEN_BACKLOG = 128


class ServerBindError(OSError):
    """The listening socket could not be bound."""

    def __init__(self, host: str, port: int, reason: str | None) -> None:
        super().__init__(f"could not bind {host}:{port}: {reason or 'unknown error'}")
        self.host = host
        self.port = port


def bind_socket(host: str, port: int) -> socket.socket:
    """Open a listening TCP socket on ``host:port``."""
    family = select_address_family(host, port)
    address = get_sockaddr(host, port, family)
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(address)
        sock.listen(LISTEN_BACKLOG)
    except OSError as exc:
        sock.close()
        raise ServerBindError(host, port, exc.strerror) from exc
    return sock


def build_server(app: Flask, host: str, port: int) -> BaseWSGIServer:
    """Bind ``host:port`` and wrap the listener in a threaded WSGI server.

    Port ``0`` binds a free port; read it back from ``server.port``.
    """
    sock = bind_socket(host, port)
    try:
        return make_server(host, port, app, threaded=True, fd=sock.fileno())
    finally:
        # make_server keeps its own duplicate of the descriptor.
        sock.close()


def serve(app: Flask, host: str, port: int) -> None:
    """Serve requests until interrupted by Ctrl-C or SIGTERM."""
    server = build_server(app, host, port)
    signal.signal(signal.SIGTERM, _interrupt)

    logger.info(f"Listening on http://{host}:{server.port}")
    for rule in sorted(app.url_map.iter_rules(), key=lambda r: r.rule):
        methods = ",".join(sorted(rule.methods - {"HEAD", "OPTIONS"}))
        logger.info(f"  {methods:<6} {rule.rule}")

    # Werkzeug closes the listener when serve_forever sees KeyboardInterrupt.
    server.serve_forever()
    logger.info("Server stopped")


def _interrupt(signum, frame) -> None:
    raise KeyboardInterrupt
