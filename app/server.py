"""
Process entry point: bind the listening socket and serve the app with uvicorn.
"""
import socket
import sys
from typing import Optional

import uvicorn

from app.core.config import Settings, settings
from app.core.exceptions import BindError
from app.core.logging import logger, setup_logging
from app.main import create_app


BACKLOG = 2048


def bind_socket(host: str, port: int) -> socket.socket:
    """
    Bind and listen on ``host:port``.

    Raises BindError if the address cannot be acquired (port in use,
    missing permission, unresolvable host, unsupported address family).
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = None
    try:
        sock = socket.socket(family, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(BACKLOG)
    except OSError as exc:
        if sock is not None:
            sock.close()
        raise BindError(host, port, exc.strerror or str(exc)) from exc

    sock.set_inheritable(True)
    return sock


def run(app_settings: Optional[Settings] = None) -> None:
    """
    Start the user service and block until it stops.

    Exits the process with status 1 if the socket cannot be bound or the
    server fails to start.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.LOG_LEVEL)

    try:
        sock = bind_socket(app_settings.HOST, app_settings.PORT)
    except BindError as exc:
        logger.error(f"{app_settings.PROJECT_NAME} failed to start: {exc}")
        sys.exit(1)

    try:
        port = sock.getsockname()[1]
        config = uvicorn.Config(
            create_app(app_settings),
            host=app_settings.HOST,
            port=port,
            log_config=None,
            log_level=app_settings.LOG_LEVEL.lower()
        )
        server = uvicorn.Server(config)

        logger.info(f"{app_settings.PROJECT_NAME} listening {port}")
        server.run(sockets=[sock])
    finally:
        sock.close()

    if not server.started:
        logger.error(f"{app_settings.PROJECT_NAME} failed to start")
        sys.exit(1)
