"""
Snippetbox: Server Entry Point
===============================

What:  Opens the TCP listener, logs the startup line, and serves the app
       with uvicorn until the process is killed.
How:   The socket is bound here rather than inside uvicorn so a bind failure
       surfaces as a ListenerError we can log and exit on ourselves.
Who:   `python -m snippetbox` and the `snippetbox` console script.

Lifecycle:
    1. setup_logging()
    2. open_listener(host, port)   → ListenerError on failure (fatal, exit 1)
    3. log "Starting server on <addr>"
    4. uvicorn serves on the pre-bound socket
"""

import logging
import socket
import sys
from typing import Optional

import uvicorn

from snippetbox.config import Settings, settings as default_settings
from snippetbox.exceptions import ListenerError
from snippetbox.main import setup_logging

logger = logging.getLogger(__name__)

# Pending-connection queue length handed to listen()
BACKLOG = 2048


def open_listener(host: str, port: int) -> socket.socket:
    """
    Bind and listen on ``host:port``.

    An empty host binds every interface: a dual-stack IPv6 socket (IPv4 and
    IPv6) where the platform supports one, every IPv4 interface otherwise.
    A host containing ":" is taken as an IPv6 address.

    Raises:
        ListenerError: the address is in use, not permitted, or unresolvable.
    """
    addr = f"{host}:{port}"
    dualstack = host == "" and socket.has_dualstack_ipv6()
    if dualstack or ":" in host:
        family = socket.AF_INET6
    else:
        family = socket.AF_INET
    try:
        sock = socket.create_server(
            (host, port),
            family=family,
            backlog=BACKLOG,
            dualstack_ipv6=dualstack,
        )
    except OSError as e:
        raise ListenerError(addr, cause=e) from e
    sock.set_inheritable(True)
    return sock


def serve(sock: socket.socket, config: Settings) -> None:
    """Run uvicorn on an already-bound socket; returns when the server stops."""
    server = uvicorn.Server(
        uvicorn.Config(
            "snippetbox.main:app",
            log_level=config.log_level.lower(),
            log_config=None,  # keep the handlers installed by setup_logging()
            access_log=False,
        )
    )
    server.run(sockets=[sock])


def main(config: Optional[Settings] = None) -> None:
    """
    Start the server.

    Exits with status 1 after logging the cause if the listener cannot be
    opened; that is the only failure that stops the process.
    """
    config = config or default_settings
    setup_logging()

    try:
        sock = open_listener(config.host, config.port)
    except ListenerError as e:
        logger.critical("%s", e.message)
        sys.exit(1)

    logger.info("Starting server on %s", config.addr)
    try:
        serve(sock, config)
    finally:
        sock.close()
