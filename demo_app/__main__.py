from __future__ import annotations

import socket

import structlog
import uvicorn

from demo_app.config import Settings, get_settings
from demo_app.main import create_app
from demo_app.observability import configure_logging


def bind_socket(host: str, port: int) -> socket.socket:
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def serve(settings: Settings) -> int:
    configure_logging(settings.log_level_value)
    logger = structlog.get_logger("demo_app")

    try:
        sock = bind_socket(settings.host, settings.port)
    except OSError as exc:
        logger.error("port_bind_failed", host=settings.host, port=settings.port, error=str(exc))
        return 1

    config = uvicorn.Config(create_app(settings), log_config=None, access_log=False)
    server = uvicorn.Server(config)
    bound_port = sock.getsockname()[1]
    logger.info(f"Server is running on port {bound_port}", host=settings.host, port=bound_port)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
    return 0


def main() -> int:
    return serve(get_settings())


if __name__ == "__main__":
    raise SystemExit(main())
